from .apper_transport import ApperRecordTransport

__all__ = ["ApperRecordTransport"]
