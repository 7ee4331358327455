"""Tests for macro configuration and logging setup."""

import json
import logging

import pytest

from solid_canonical import (
    DEFAULT_KEEP_COUNT,
    MacroConfig,
    PlaneNames,
    RetryPolicy,
    load_config,
    save_config,
    setup_logging,
)
from solid_canonical.logging_config import LOGGER_NAMES


class TestPlaneNames:
    def test_english_defaults(self):
        planes = PlaneNames()
        assert (planes.front, planes.top, planes.right) == ("Front Plane", "Top Plane", "Right Plane")

    @pytest.mark.parametrize("alias, expected", [
        ("XY", "Front Plane"),
        ("front", "Front Plane"),
        ("xz", "Top Plane"),
        ("Top", "Top Plane"),
        ("YZ", "Right Plane"),
        ("RIGHT", "Right Plane"),
    ])
    def test_resolve_aliases(self, alias, expected):
        assert PlaneNames().resolve(alias) == expected

    def test_resolve_literal_name(self):
        assert PlaneNames().resolve("Plane7") == "Plane7"

    def test_chinese_preset(self):
        assert PlaneNames.chinese().resolve("yz") == "右视基准面"

    def test_from_dict_ignores_unknown_keys(self):
        planes = PlaneNames.from_dict({"front": "Ebene vorne", "extra": "x"})
        assert planes.front == "Ebene vorne"
        assert planes.top == "Top Plane"


class TestMacroConfig:
    def test_defaults(self):
        config = MacroConfig()
        assert config.keep_count == DEFAULT_KEEP_COUNT == 3000
        assert config.visible is True
        assert config.target_path is None
        assert config.save_retry == RetryPolicy.forever()
        assert config.plane_names == PlaneNames()

    def test_negative_keep_count(self):
        with pytest.raises(ValueError):
            MacroConfig(keep_count=-1)

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "macro.json"
        config = MacroConfig(
            target_path="D:/models/big.SLDPRT",
            keep_count=500,
            visible=False,
            save_retry=RetryPolicy(max_attempts=4, delay=1.0),
            plane_names=PlaneNames.chinese(),
        )
        save_config(config, path)
        assert load_config(path) == config

    def test_load_partial_file(self, tmp_path):
        path = tmp_path / "macro.json"
        path.write_text(json.dumps({"keep_count": 10}), encoding="utf-8")
        config = load_config(path)
        assert config.keep_count == 10
        assert config.save_retry == RetryPolicy.forever()


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_loggers(self):
        saved = {}
        for name in LOGGER_NAMES:
            logger = logging.getLogger(name)
            saved[name] = (logger.level, list(logger.handlers), logger.propagate)
        yield
        for name, (level, handlers, propagate) in saved.items():
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.setLevel(level)
            logger.handlers = handlers
            logger.propagate = propagate

    def test_configures_package_loggers(self):
        setup_logging(logging.DEBUG)
        for name in LOGGER_NAMES:
            logger = logging.getLogger(name)
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            assert logger.propagate is False

    def test_repeated_calls_do_not_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("solid_canonical").handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "macro.log"
        setup_logging(logging.INFO, str(log_file))
        logging.getLogger("solid_adapter_solidworks.runs").info("hello from a macro")
        for handler in logging.getLogger("solid_adapter_solidworks").handlers:
            handler.flush()
        assert "hello from a macro" in log_file.read_text(encoding="utf-8")
