"""Tests for the demonstration driver and its configuration."""
import json
import logging
import logging.handlers
import sys
import pytest
from config import DemoConfig
from patterns import Order, Report
from patterns.demo import (
    demonstrate_builder,
    demonstrate_prototype,
    demonstrate_singleton,
    run_all
)
from utils import ErrorContext, LoggerFactory, StructuredFormatter, get_logger
from utils.exceptions import (
    ConfigurationError,
    SettingNotFoundError,
    SettingsIOError
)


class TestDemoConfig:
    """Tests for the demonstration configuration."""

    def test_defaults(self):
        """Test the default inputs."""
        config = DemoConfig()

        assert config.presets == {'username': 'user1'}
        assert config.reader_threads == 2
        assert config.products == [
            {'name': 'Laptop', 'price': 1200},
            {'name': 'Smartphone', 'price': 800},
        ]
        assert config.payment_method == "Credit Card"

    def test_save_load_yaml(self, tmp_path):
        """Test saving and loading config as YAML."""
        config = DemoConfig(watched_key='theme', presets={'theme': 'dark'}, discount=5)
        path = tmp_path / 'demo.yaml'

        config.to_yaml(str(path))
        loaded = DemoConfig.from_yaml(str(path))

        assert loaded == config

    def test_empty_yaml_uses_defaults(self, tmp_path):
        """Test that an empty file yields the default config."""
        path = tmp_path / 'demo.yaml'
        path.write_text("")

        assert DemoConfig.from_yaml(str(path)) == DemoConfig()

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            DemoConfig.from_dict({'learning_rate': 0.1})

        assert exc_info.value.details['unknown_keys'] == ['learning_rate']

    def test_missing_file(self, tmp_path):
        """Test loading a non-existent file."""
        with pytest.raises(ConfigurationError):
            DemoConfig.from_yaml(str(tmp_path / 'missing.yaml'))

    def test_invalid_reader_threads(self):
        """Test that at least one reader is required."""
        with pytest.raises(ConfigurationError):
            DemoConfig(reader_threads=0)

    def test_invalid_product(self):
        """Test that products need a name and a price."""
        with pytest.raises(ConfigurationError):
            DemoConfig(products=[{'name': 'Laptop'}])

    def test_numeric_preset_from_yaml(self, tmp_path):
        """Test that scalar presets from YAML are stored as text."""
        path = tmp_path / 'demo.yaml'
        path.write_text("presets:\n  yaml_timeout: 30\n  yaml_debug: true\nwatched_key: yaml_timeout\n")

        config = DemoConfig.from_yaml(str(path))

        assert config.presets == {'yaml_timeout': '30', 'yaml_debug': 'True'}
        assert demonstrate_singleton(config) == ['30', '30']

    def test_nested_preset(self):
        """Test that a non-scalar preset value is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            DemoConfig(presets={'servers': ['a', 'b']})

        assert 'servers' in str(exc_info.value)

    def test_presets_must_be_mapping(self):
        """Test that presets given as a list are rejected."""
        with pytest.raises(ConfigurationError):
            DemoConfig(presets=['username', 'user1'])

    @pytest.mark.parametrize('document', ["5\n", "- name\n- price\n", "just text\n"])
    def test_yaml_top_level_not_mapping(self, tmp_path, document):
        """Test that a YAML document that is not a mapping is rejected."""
        path = tmp_path / 'demo.yaml'
        path.write_text(document)

        with pytest.raises(ConfigurationError) as exc_info:
            DemoConfig.from_yaml(str(path))

        assert 'mapping' in str(exc_info.value)

    @pytest.mark.parametrize('products', [['Laptop'], [['Laptop', 1200]], 5])
    def test_malformed_products(self, products):
        """Test that products must be a list of name/price mappings."""
        with pytest.raises(ConfigurationError):
            DemoConfig(products=products)


class TestDemonstrations:
    """Tests for the three demonstrations."""

    def test_singleton_demo(self, capsys):
        """Test that every reader sees the preset value."""
        config = DemoConfig(presets={'demo_user': 'user1'}, watched_key='demo_user', reader_threads=3)

        values = demonstrate_singleton(config)

        assert values == ['user1', 'user1', 'user1']
        out = capsys.readouterr().out
        assert out.count("Setting 'demo_user': user1") == 3

    def test_singleton_demo_with_file(self, tmp_path):
        """Test that a settings file overrides the presets."""
        path = tmp_path / 'settings.txt'
        path.write_text("demo_file_user from_file\n")
        config = DemoConfig(
            presets={'demo_file_user': 'preset'},
            settings_file=str(path),
            watched_key='demo_file_user'
        )

        assert demonstrate_singleton(config) == ['from_file', 'from_file']

    def test_singleton_demo_missing_key(self):
        """Test that a reader's NotFound reaches the caller."""
        config = DemoConfig(presets={}, watched_key='demo_key_never_set')

        with pytest.raises(SettingNotFoundError):
            demonstrate_singleton(config)

    def test_singleton_demo_missing_file(self, tmp_path):
        """Test that an unreadable settings file aborts the demonstration."""
        config = DemoConfig(settings_file=str(tmp_path / 'missing.txt'))

        with pytest.raises(SettingsIOError):
            demonstrate_singleton(config)

    def test_builder_demo(self, capsys):
        """Test the text and HTML reports."""
        text_report, html_report = demonstrate_builder(DemoConfig())

        assert text_report == Report(
            "Text Header: Report Header",
            "Text Content: This is the report content.",
            "Text Footer: Report Footer"
        )
        assert html_report == Report(
            "<h1>Report Header</h1>",
            "<p>This is the report content.</p>",
            "<footer>Report Footer</footer>"
        )
        out = capsys.readouterr().out
        assert "Text Report:\nHeader: Text Header: Report Header\n" in out
        assert "HTML Report:\nHeader: <h1>Report Header</h1>\n" in out

    def test_prototype_demo(self, capsys):
        """Test that the cloned order mirrors the original."""
        original, cloned = demonstrate_prototype(DemoConfig())

        assert isinstance(cloned, Order)
        assert cloned.describe() == original.describe()
        assert all(a is not b for a, b in zip(original.products, cloned.products))
        out = capsys.readouterr().out
        assert "Original Order:\nOrder details:\nProduct: Laptop, Price: 1200\n" in out
        assert "Cloned Order:\n" in out
        assert "Shipping Cost: 50, Discount: 10, Payment: Credit Card" in out

    def test_run_all(self, capsys):
        """Test running every demonstration."""
        run_all()

        out = capsys.readouterr().out
        assert "Setting 'username': user1" in out
        assert "HTML Report:" in out
        assert "Cloned Order:" in out


class TestErrorContext:
    """Tests for the error logging context manager."""

    def test_reraises_and_logs_details(self, caplog):
        """Test that failures are logged with details and re-raised."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(ConfigurationError):
                with ErrorContext("failing step"):
                    raise ConfigurationError("bad", details={'key': 'value'})

        record = caplog.records[-1]
        assert "failing step" in record.getMessage()
        assert record.error_details['details'] == {'key': 'value'}

    def test_reraises_other_errors_with_traceback(self, caplog):
        """Test that unexpected errors are logged with exc_info and re-raised."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(ValueError):
                with ErrorContext("plain step"):
                    raise ValueError("boom")

        record = caplog.records[-1]
        assert record.exc_info[0] is ValueError
        assert not hasattr(record, 'error_details')


@pytest.fixture
def fresh_logging():
    """Let LoggerFactory configure again and undo its handlers afterwards."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    saved_configured = LoggerFactory._configured
    LoggerFactory._configured = False

    yield

    for handler in list(root_logger.handlers):
        added = handler not in saved_handlers
        if added and type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)
    LoggerFactory._configured = saved_configured


class TestLogging:
    """Tests for logging configuration."""

    def test_log_dir_writes_debug_file(self, tmp_path, fresh_logging):
        """Test that a log directory receives a plain-text debug log."""
        LoggerFactory.configure(log_level='WARNING', log_dir=str(tmp_path / 'logs'), enable_console=False)

        get_logger('tests.logging').debug("debug line for the file")

        content = (tmp_path / 'logs' / 'pattern_showcase.log').read_text()
        assert "DEBUG - debug line for the file" in content

    def test_configure_only_once(self, tmp_path, fresh_logging):
        """Test that a second configure call adds no handlers."""
        LoggerFactory.configure(log_dir=str(tmp_path), enable_console=False)
        handler_count = len(logging.getLogger().handlers)

        LoggerFactory.configure(log_dir=str(tmp_path), enable_console=True)

        assert len(logging.getLogger().handlers) == handler_count

    def test_structured_log_of_failed_demonstration(self, tmp_path, fresh_logging):
        """Test JSON log lines, including error details, from a failing run."""
        config = DemoConfig(
            presets={},
            watched_key='structured_key_never_set',
            log_dir=str(tmp_path),
            structured_logs=True
        )

        with pytest.raises(SettingNotFoundError):
            run_all(config)

        lines = (tmp_path / 'pattern_showcase.log').read_text().splitlines()
        records = [json.loads(line) for line in lines]
        errors = [r for r in records if r['level'] == 'ERROR']

        assert errors
        details = errors[-1]['error_details']
        assert details['error_type'] == 'SettingNotFoundError'
        assert details['details']['key'] == 'structured_key_never_set'
        assert any(r['message'] == "Starting operation: singleton demonstration" for r in records)

    def test_structured_formatter_exception(self):
        """Test that exception info is serialized."""
        try:
            raise RuntimeError("failed")
        except RuntimeError:
            record = logging.LogRecord(
                'tests', logging.ERROR, __file__, 1, "message", None, sys.exc_info()
            )

        data = json.loads(StructuredFormatter().format(record))

        assert data['message'] == "message"
        assert data['exception']['type'] == 'RuntimeError'
        assert data['exception']['message'] == 'failed'
