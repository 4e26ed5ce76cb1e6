import re
import threading

from petnet import log

PREFIX_RE = re.compile(r"^PETNET\[(\d+)\] (\d+)\.(\d{6})> ")


def test_log_prefix_format():
    prefix = log.log_prefix()
    match = PREFIX_RE.match(prefix)
    assert match is not None
    assert int(match.group(1)) == threading.get_ident()
    assert prefix.endswith("> ")


def test_logf_formats_arguments(capsys):
    log.logf("value=%d name=%s\n", 42, "eth0")
    out = capsys.readouterr().out
    assert PREFIX_RE.match(out)
    assert out.endswith("value=42 name=eth0\n")


def test_printf_without_arguments_keeps_percent(capsys):
    log.printf("100%\n")
    out = capsys.readouterr().out
    assert out.endswith("> 100%\n")


def test_log_str_is_verbatim(capsys):
    log.log_str("50% %s %d\n")
    out = capsys.readouterr().out
    assert out.endswith("> 50% %s %d\n")


def test_print_str_is_verbatim(capsys):
    log.print_str("hello %x")
    out = capsys.readouterr().out
    assert PREFIX_RE.match(out)
    assert out.endswith("hello %x")


def test_log_error_tags_caller(capsys):
    log.log_error("Could not allocate petnet state")
    out = capsys.readouterr().out
    assert "error> test_log.py(" in out
    assert out.endswith("Could not allocate petnet state\n")


def test_log_error_does_not_double_newline(capsys):
    log.log_error("Invalid Config\n")
    out = capsys.readouterr().out
    assert out.endswith("Invalid Config\n")
    assert not out.endswith("\n\n")


def test_log_debug_tags_caller(capsys):
    log.log_debug("mac_addr_str=x")
    out = capsys.readouterr().out
    match = re.search(r"debug> test_log\.py\((\d+)\): mac_addr_str=x\n$", out)
    assert match is not None
    assert int(match.group(1)) > 0