from app import Server
from stocknotifier.domain.notification import NotificationReport


def test_registry_lists_inventory_actions():
    client = Server().test_client()

    response = client.get("/ms/")

    assert response.get_json() == {
        "inventory": {"actions": ["low-stock-notify"]}
    }


def test_low_stock_notify_route_runs_service(mocker):
    service_cls = mocker.patch(
        "stocknotifier.action.inventory.low_stock_notify_action"
        ".LowStockNotificationService")
    service_cls.return_value.run.return_value = NotificationReport(
        threshold=5, low_stock_skus=["A"])
    mocker.patch("stocknotifier.util.config.notifier_config.load_dotenv")
    client = Server().test_client()

    response = client.post("/ms/inventory/low-stock-notify?threshold=5")

    assert response.status_code == 200
    assert response.get_json()["low_stock_skus"] == ["A"]
    service_cls.return_value.run.assert_called_once_with(threshold=5)


def test_low_stock_notify_route_returns_error(mocker, monkeypatch):
    monkeypatch.delenv("SHOPIFY_API_PASSWORD")
    mocker.patch("stocknotifier.util.config.notifier_config.load_dotenv")
    post_sns = mocker.patch("stocknotifier.action.action.post_exception_to_sns")
    client = Server().test_client()

    response = client.post("/ms/inventory/low-stock-notify")

    assert response.status_code == 500
    assert "SHOPIFY_API_PASSWORD" in response.get_json()["error"]
    post_sns.assert_called_once()


def test_low_stock_notify_route_rejects_bad_threshold(mocker):
    service_cls = mocker.patch(
        "stocknotifier.action.inventory.low_stock_notify_action"
        ".LowStockNotificationService")
    post_sns = mocker.patch("stocknotifier.action.action.post_exception_to_sns")
    client = Server().test_client()

    response = client.post("/ms/inventory/low-stock-notify?threshold=ten")

    assert response.status_code == 400
    assert "threshold" in response.get_json()["error"]
    service_cls.assert_not_called()
    post_sns.assert_not_called()
