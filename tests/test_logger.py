"""debug / silent flags on the minarai logger."""

import logging

from minarai.logger import configure, get_logger, log_obj


def test_child_names():
    assert get_logger("client").name == "minarai.client"
    assert get_logger("minarai").name == "minarai"


def test_silent_silences_children(caplog):
    configure(debug=True, silent=True)
    get_logger("client").warning("should not appear")
    assert caplog.records == []


def test_debug_dumps_objects(caplog):
    configure(debug=True)
    log_obj(get_logger("client"), "send", {"a": 1})
    assert '"a": 1' in caplog.records[-1].getMessage()
    assert caplog.records[-1].levelno == logging.DEBUG


def test_info_skips_object_dumps(caplog):
    configure()
    log_obj(get_logger("client"), "send", {"a": 1})
    assert caplog.records == []


def test_handler_installed_once():
    configure()
    configure(debug=True)
    ours = [h for h in logging.getLogger("minarai").handlers if getattr(h, "_minarai", False)]
    assert len(ours) == 1
