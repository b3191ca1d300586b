import logging

from flask import Flask

from stocknotifier.manager.inventory.inventory_manager import InventoryManager
from stocknotifier.manager.manager import Manager
from stocknotifier.util.logging import set_up_logging


class Server(Flask):
    service_name: str = "StockNotifierService"
    service_root: str = "/ms/"
    managers: list[Manager] = [
        InventoryManager(),
    ]

    @property
    def registry(self):
        return {m.name: m.list() for m in self.managers}

    def __init__(self):
        super().__init__(self.service_name)

        self.add_url_rule(
            self.service_root,
            view_func=lambda: self.registry
        )

        for manager in self.managers:
            self.register_blueprint(manager.blueprint)


server = Server()

if __name__ == "__main__":
    set_up_logging()

    logging.info("Starting StockNotifierService application")

    server.run(debug=True)
