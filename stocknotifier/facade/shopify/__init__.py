from stocknotifier.facade.shopify.shopify_facade import ShopifyFacade
