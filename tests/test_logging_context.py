# tests/test_logging_context.py
from __future__ import annotations

import logging

from colorcore.logging_context import action_var, corr_id_var, log_context, new_corr_id, widget_var
from colorcore.logging_setup import ContextFilter


def _record(**extra) -> logging.LogRecord:
    rec = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_log_context_sets_and_restores():
    assert widget_var.get() == "-"
    with log_context(widget="polar_picker#1", action="pick"):
        assert widget_var.get() == "polar_picker#1"
        assert action_var.get() == "pick"
        with log_context(action="render_wheel"):
            assert action_var.get() == "render_wheel"
        assert action_var.get() == "pick"
    assert widget_var.get() == "-"
    assert action_var.get() == "-"


def test_filter_injects_context_fields():
    with log_context(corr_id="abc", widget="w"):
        rec = _record()
        assert ContextFilter().filter(rec)
    assert (rec.corr_id, rec.widget, rec.action) == ("abc", "w", "-")


def test_filter_keeps_explicit_extra():
    with log_context(action="pick"):
        rec = _record(action="boot")
        ContextFilter().filter(rec)
    assert rec.action == "boot"
    assert rec.corr_id == corr_id_var.get()


def test_new_corr_id_shape():
    cid = new_corr_id()
    assert len(cid) == 12
    assert cid != new_corr_id()
