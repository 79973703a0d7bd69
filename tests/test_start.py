"""Launcher helpers."""

from __future__ import annotations

import socket

import pytest

import start


def test_find_free_port_skips_a_taken_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen()
        taken = s.getsockname()[1]
        port = start.find_free_port(taken, 5)
    assert port != taken
    assert taken < port < taken + 5


def test_find_free_port_gives_up():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen()
        taken = s.getsockname()[1]
        with pytest.raises(RuntimeError):
            start.find_free_port(taken, 1)
