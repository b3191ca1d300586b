from stocknotifier.action.action import Action
from stocknotifier.action.inventory.low_stock_notify_action import \
    LowStockNotifyAction
from stocknotifier.manager.manager import Manager


class InventoryManager(Manager):

    def get_actions(self) -> list[Action]:
        return [
            LowStockNotifyAction()
        ]
