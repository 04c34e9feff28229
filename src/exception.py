"""Cold Store Alert Webhook Exception Definitions"""


class ColdStoreError(Exception):
    """Base exception for the cold store alert service"""

    pass


class StatusReportError(ColdStoreError):
    """Request body could not be decoded into a status report"""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class NotifierConfigError(ColdStoreError):
    """Notifier configuration is invalid"""

    def __init__(self, message: str, config_path: str | None = None):
        super().__init__(message)
        self.config_path = config_path
