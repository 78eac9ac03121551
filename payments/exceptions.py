class PaymentError(Exception):
    """Payment failure with the HTTP status and message shown to the client."""
    status_code = 500
    message = "Payment processing failed"

    def __init__(self, message=None, status_code=None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidAmountError(PaymentError):
    status_code = 400
    message = "Invalid amount"


class SignatureMismatchError(PaymentError):
    status_code = 400
    message = "Payment failed"


class DuplicatePaymentError(PaymentError):
    status_code = 400
    message = "Payment already processed"


class OrderUpdateError(PaymentError):
    status_code = 500
    message = "Failed to update order status"


class GatewayError(PaymentError):
    status_code = 500
    message = "An error occurred during checkout"
