"""
Design patterns: singleton settings, report builders and order prototypes.
"""
from .singleton import (
    Singleton,
    SingletonMeta,
    ConfigurationManager,
    get_instance
)
from .builder import (
    Builder,
    BuildStage,
    Report,
    ReportBuilder,
    TextReportBuilder,
    HtmlReportBuilder,
    ReportDirector
)
from .prototype import (
    Prototype,
    Product,
    Order
)

__all__ = [
    'Singleton',
    'SingletonMeta',
    'ConfigurationManager',
    'get_instance',
    'Builder',
    'BuildStage',
    'Report',
    'ReportBuilder',
    'TextReportBuilder',
    'HtmlReportBuilder',
    'ReportDirector',
    'Prototype',
    'Product',
    'Order',
]
