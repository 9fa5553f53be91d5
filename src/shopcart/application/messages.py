"""User-facing error messages reported through the Notifier."""

OUT_OF_STOCK = "Requested quantity is out of stock"
ADD_PRODUCT_FAILED = "Failed to add product"
REMOVE_PRODUCT_FAILED = "Failed to remove product"
UPDATE_AMOUNT_FAILED = "Failed to update product amount"
