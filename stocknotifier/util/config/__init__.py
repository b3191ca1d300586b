from stocknotifier.util.config.notifier_config import NotifierConfig
