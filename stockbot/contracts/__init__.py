from .series import OHLCVRecord, SeriesMatch
from .report import ReportField, RichReport
from .endpoints import ProviderEndpoints, ChatEndpoints, ServiceEndpoints
