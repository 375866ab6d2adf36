# Copyright (C) 2019-2020 Intel Corporation
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Test config layering and the tunnel_util command line front end
"""

import pytest

from tunnelcore.common.config import ConfigArgsParser
from tunnelcore.common.util import read_binary_file
from tunnelcore.tool import core


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TUNNELCORE_CONFIG", raising=False)
    monkeypatch.delenv("TUNNELCORE_CONFIG_DEBUG", raising=False)
    return tmp_path


def run(argv):
    config = ConfigArgsParser().parse_util_options(argv)
    return core.start(config)


def test_defaults_from_packaged_config():

    config = ConfigArgsParser().parse_util_options(["jitter", "100"])
    assert(config.command == "jitter")
    assert(config.jitter_factor == 0.1)
    assert(config.verbose is False and config.quiet is False)

    config = ConfigArgsParser().parse_util_options(["coin"])
    assert(config.coin_weight == 0.5)
    assert(config.coin_count == 1)


def test_workdir_config(isolated_config, capsys):

    (isolated_config / "tunnelcore.yaml").write_text("jitter_factor: 0.0\n")
    assert(run(["jitter", "1234"]) == 0)
    assert(capsys.readouterr().out.strip() == "1234")

    # command line wins over config
    config = ConfigArgsParser().parse_util_options(["jitter", "1234", "--factor", "0.5"])
    assert(config.jitter_factor == 0.5)


def test_env_config(isolated_config, monkeypatch, capsys):

    env_config = isolated_config / "env.yaml"
    env_config.write_text("coin_weight: 1.0\ncoin_count: 50\nbogus_option: 1\n")
    monkeypatch.setenv("TUNNELCORE_CONFIG", str(env_config))

    assert(run(["coin"]) == 0)
    captured = capsys.readouterr()
    assert(captured.out.strip() == "50/50 heads")
    assert("bogus_option" in captured.err), "unrecognized option not reported"


def test_invalid_arguments():

    with pytest.raises(SystemExit):
        ConfigArgsParser().parse_util_options(["jitter", "100", "--factor", "2"])
    with pytest.raises(SystemExit):
        ConfigArgsParser().parse_util_options(["perm", "-3"])
    with pytest.raises(SystemExit):
        ConfigArgsParser().parse_util_options([])


def test_commands(capsys):

    assert(run(["perm", "10"]) == 0)
    perm = [int(x) for x in capsys.readouterr().out.split()]
    assert(sorted(perm) == list(range(10)))

    assert(run(["range", "5", "5"]) == 0)
    assert(capsys.readouterr().out.strip() == "5")

    assert(run(["period", "7", "7"]) == 0)
    assert(capsys.readouterr().out.strip() == "7us")

    assert(run(["coin", "--weight", "0"]) == 0)
    assert(capsys.readouterr().out.strip() == "tails")

    assert(run(["bytes", "10000"]) == 0)
    assert(capsys.readouterr().out.strip() == "9.8K")


def test_invalid_range(capsys):

    assert(run(["range", "9", "1"]) == 1)
    assert("invalid range" in capsys.readouterr().err)


def test_compress_roundtrip(isolated_config, capsys):

    payload = isolated_config / "payload"
    payload.write_bytes(b"tunnel payload " * 100)
    packed = isolated_config / "payload.lz4"
    unpacked = isolated_config / "payload.out"
    log_file = isolated_config / "debug.log"

    assert(run(["-l", "--log-file", str(log_file), "compress", str(payload), str(packed)]) == 0)
    assert(run(["decompress", str(packed), str(unpacked)]) == 0)
    assert(read_binary_file(str(unpacked)) == payload.read_bytes())

    assert("Compressed 1.5K to" in log_file.read_text()), "compress not logged to file"


def test_decompress_corrupt(isolated_config, capsys):

    garbage = isolated_config / "garbage"
    garbage.write_bytes(b"not a blob at all")

    assert(run(["decompress", str(garbage), str(isolated_config / "out")]) == 1)
    assert("[ERROR]" in capsys.readouterr().err)
    assert(not (isolated_config / "out").exists())
