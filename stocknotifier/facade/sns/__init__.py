from stocknotifier.facade.sns.sns_facade import SNSFacade
