class ReceiptProcessorError(Exception):
    """Base class for errors raised by the scoring core."""

class ReceiptNotFound(ReceiptProcessorError):
    def __init__(self, receipt_id: int):
        self.receipt_id = receipt_id
        super().__init__(f"Receipt with ID [{receipt_id}] could not be found")
