"""
Unit tests for Env configuration and Log
"""

import logging

import pytest

from quickreflect import ArgErr, Env, Log, LogLevel, LogRec


class TestEnv:

    def test_config(self, env):
        e = env({"QUICKREFLECT_MAX_THREADS": "3"})
        assert e is Env.cur()
        assert e.config("max.threads") == "3"
        assert e.config_int("max.threads", 8) == 3

    def test_defaults(self, env):
        env({})
        assert Env.cur().config("log.level") is None
        assert Env.cur().config("log.level", "info") == "info"
        assert Env.cur().config_int("max.threads", 8) == 8

    def test_empty_and_invalid_values(self, env):
        env({"QUICKREFLECT_LOG_LEVEL": "", "QUICKREFLECT_MAX_THREADS": "many"})
        assert Env.cur().config("log.level", "info") == "info"
        assert Env.cur().config_int("max.threads", 8) == 8

    def test_vars_is_a_copy(self, env):
        e = env({"A": "1"})
        e.vars()["A"] = "2"
        assert e.vars() == {"A": "1"}


class TestLogLevel:

    def test_from_str(self):
        assert LogLevel.from_str("WARN") is LogLevel.warn
        assert LogLevel.from_str("bogus", False) is None
        with pytest.raises(ArgErr):
            LogLevel.from_str("bogus")

    def test_order(self):
        assert LogLevel.debug < LogLevel.info < LogLevel.warn < LogLevel.err < LogLevel.silent
        assert LogLevel.warn.py_level() == logging.WARNING


class TestLog:

    def test_get_is_cached(self):
        assert Log.get("quickreflect.test") is Log.get("quickreflect.test")

    def test_default_level_from_config(self, env):
        env({"QUICKREFLECT_LOG_LEVEL": "debug"})
        assert Log("quickreflect.fresh").level() is LogLevel.debug
        env({"QUICKREFLECT_LOG_LEVEL": "nonsense"})
        assert Log("quickreflect.fresh").level() is LogLevel.info

    def test_levels_filter_records(self, log_recs):
        log = Log("quickreflect.filter", LogLevel.warn)
        log.debug("hidden")
        log.info("hidden")
        log.warn("shown")
        log.err("also shown")
        assert [(r.level(), r.msg()) for r in log_recs] == [
            (LogLevel.warn, "shown"),
            (LogLevel.err, "also shown"),
        ]
        assert log_recs[0].log_name() == "quickreflect.filter"

    def test_silent(self, log_recs):
        log = Log("quickreflect.silent", LogLevel.silent)
        log.err("nothing")
        assert log_recs == []

    def test_forwards_to_logging(self, caplog):
        log = Log("quickreflect.forward", LogLevel.info)
        with caplog.at_level(logging.INFO, logger="quickreflect.forward"):
            log.info("forwarded")
        assert [r.getMessage() for r in caplog.records] == ["forwarded"]

    def test_set_level(self):
        log = Log("quickreflect.level")
        log.level(LogLevel.debug)
        assert log.is_debug()

    def test_handler_must_be_callable(self):
        with pytest.raises(ArgErr):
            Log.add_handler("not callable")

    def test_rec_to_str(self):
        rec = LogRec(0, LogLevel.info, "x", "hello")
        assert rec.to_str() == "[info] x: hello"
