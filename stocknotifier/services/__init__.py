from stocknotifier.services.low_stock_notification_service import LowStockNotificationService
