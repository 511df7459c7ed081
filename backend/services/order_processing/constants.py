ORDER_STATUS_PROCESSED = "processed"

# Passed through to the gateway as-is; the gateway decides what it means
EXPRESS_PRIORITY = "highPriority"

NOTIFICATION_MESSAGE = "Your order has been processed."
