import logging

from stocknotifier.domain.catalog import Catalog
from stocknotifier.domain.notification import NotificationReport
from stocknotifier.facade.shopify import ShopifyFacade
from stocknotifier.facade.sns import SNSFacade
from stocknotifier.util.config import NotifierConfig
from stocknotifier.util.inventory import build_notification_message
from stocknotifier.util.inventory import find_low_stock_skus


class LowStockNotificationService:
    """Checks Shopify inventory and publishes the SKUs running low."""

    def __init__(
            self,
            config: NotifierConfig,
            shopify: ShopifyFacade | None = None,
            sns: SNSFacade | None = None,
            logger: logging.Logger | None = None,
    ):
        self.config = config
        self.shopify = shopify or ShopifyFacade(config)
        self.sns = sns or SNSFacade(config.topic_arn)
        self.logger = logger or logging.getLogger(__name__)

    def run(self, threshold: int | None = None) -> NotificationReport:
        """
        Fetches the catalog, collects every SKU at or below the threshold and
        publishes them as one comma separated message. Nothing is published
        when no SKU qualifies.

        :param threshold: overrides the configured threshold for this run
        :return: report of the SKUs found, skipped entries and publish outcome
        """
        if threshold is None:
            threshold = self.config.threshold
        self.logger.info("Starting low stock check for %s (threshold %s)",
                         self.config.shopify_domain, threshold)

        catalog = Catalog.from_products(self.shopify.get_products())
        if catalog.skipped:
            self.logger.warning("Skipped %s invalid catalog entries",
                                len(catalog.skipped))

        report = NotificationReport(
            threshold=threshold,
            low_stock_skus=find_low_stock_skus(catalog, threshold),
            skipped=catalog.skipped,
        )
        if not report.low_stock_skus:
            self.logger.info("No SKUs at or below %s, nothing to publish",
                             threshold)
            return report

        self.logger.info("Found %s low stock SKUs", len(report.low_stock_skus))
        report.publish_result = self.sns.publish(
            build_notification_message(report.low_stock_skus))
        return report
