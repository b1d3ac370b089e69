from .report import PackageReportSchema, ScanReportSchema

__all__ = ["PackageReportSchema", "ScanReportSchema"]
