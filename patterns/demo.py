"""
Demonstrations of the singleton, builder and prototype patterns.

The three demonstrations share no state and can run in any order.
"""
import threading
from typing import List, Optional, Tuple
from config.demo_config import DemoConfig
from utils.error_handlers import ErrorContext
from utils.logging_config import LoggerFactory, get_logger
from .builder import HtmlReportBuilder, Report, ReportDirector, TextReportBuilder
from .prototype import Order, Product
from .singleton import get_instance

logger = get_logger(__name__)


def demonstrate_singleton(config: DemoConfig) -> List[str]:
    """
    Populate the singleton settings store, then read it from worker threads.

    Returns the values read by the workers, one per thread.
    """
    with ErrorContext("singleton demonstration"):
        manager = get_instance()
        for key, value in config.presets.items():
            manager.set_setting(key, value)
        if config.settings_file:
            manager.load_settings_from_file(config.settings_file)

        results: List[Optional[str]] = [None] * config.reader_threads
        errors: List[BaseException] = []

        def read_setting(index: int):
            try:
                value = get_instance().get_setting(config.watched_key)
            except Exception as e:
                errors.append(e)
                return
            results[index] = value
            print(f"Setting '{config.watched_key}': {value}")

        workers = [
            threading.Thread(target=read_setting, args=(i,), name=f"reader-{i}")
            for i in range(config.reader_threads)
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        if errors:
            raise errors[0]

    return results


def demonstrate_builder(config: DemoConfig) -> Tuple[Report, Report]:
    """Build the same report with the text and HTML builders."""
    with ErrorContext("builder demonstration"):
        director = ReportDirector()
        inputs = (config.report_header, config.report_content, config.report_footer)

        text_report = director.construct_report(TextReportBuilder(), *inputs)
        html_report = director.construct_report(HtmlReportBuilder(), *inputs)

        print("\nText Report:")
        text_report.display()

        print("\nHTML Report:")
        html_report.display()

    return text_report, html_report


def demonstrate_prototype(config: DemoConfig) -> Tuple[Order, Order]:
    """Fill an order from the configured products and clone it."""
    with ErrorContext("prototype demonstration"):
        original_order = Order(config.shipping_cost, config.discount, config.payment_method)
        for item in config.products:
            original_order.add_product(Product(item['name'], item['price']))

        cloned_order = original_order.clone()

        print("\nOriginal Order:")
        original_order.display()

        print("\nCloned Order:")
        cloned_order.display()

    return original_order, cloned_order


def run_all(config: Optional[DemoConfig] = None):
    """Run every demonstration in sequence."""
    config = config or DemoConfig()
    LoggerFactory.configure(
        log_level=config.log_level,
        log_dir=config.log_dir,
        enable_structured=config.structured_logs
    )

    demonstrate_singleton(config)
    demonstrate_builder(config)
    demonstrate_prototype(config)
