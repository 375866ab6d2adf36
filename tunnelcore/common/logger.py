# Copyright 2021 Armand Schinkel
# Copyright 2019-2020 Intel Corporation
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import sys
import time

from datetime import timedelta

import tunnelcore.common.color as color

LOG_LEVEL = {
    "DEBUG": 1, # verbose/debug - enable with --verbose or --debug
    "INFO":  2, # normal reporting - disable stdout with --quiet but --log will still include them
    "WARN":  3, # minor/correctable issues
    "ERROR": 4, # major/fatal issues
}

# --quiet - mute stdout, only warnings and errors remain
# --verbose - enable verbose stdout (logger.debug())
# --debug - max verbosity, also in the log file
# --log - log outputs to file, combine with --debug for max verbosity


class Logger():
    def __init__(self):
        self.init_time = time.time()
        self.stdout_level = LOG_LEVEL["INFO"]
        self.file_level = None
        self.log_file = None
        self.use_color = sys.stderr.isatty()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def init(self, stdout_level="INFO", file_level=None, log_file=None):
        self.close()
        self.stdout_level = LOG_LEVEL[stdout_level]
        self.file_level = None
        if file_level and log_file:
            self.file_level = LOG_LEVEL[file_level]
            self.log_file = open(log_file, "a")

    def close(self):
        if self.log_file:
            self.log_file.close()
            self.log_file = None

    def file_log(self, msg_level, msg):
        if self.file_level and self.file_level <= LOG_LEVEL[msg_level]:
            self.log_file.write(str(timedelta(seconds=time.time() - self.init_time)) + " " + msg + "\n")
            self.log_file.flush()

    def debug(self, msg):
        self.file_log("DEBUG", msg)
        if self.stdout_level <= LOG_LEVEL["DEBUG"]:
            print(msg, file=sys.stderr)

    def info(self, msg):
        self.file_log("INFO", msg)
        if self.stdout_level <= LOG_LEVEL["INFO"]:
            print(msg, file=sys.stderr)

    def warn(self, msg):
        self.file_log("WARN", "[WARN] " + msg)
        print(color.colorize(msg, color.WARNING, self.use_color), file=sys.stderr, flush=True)

    def error(self, msg):
        self.file_log("ERROR", "[ERROR] " + msg)
        print(color.colorize("[ERROR] " + msg, color.FAIL, self.use_color), file=sys.stderr, flush=True)


logger = Logger()


def init_logger(config):

    # Default is INFO level to console, and no file logging.
    # Useful modifiers:
    #  -v / -q to increase/decrease console logging
    #  -l / --log to enable file logging at standard level
    #  --debug to log everything, to console and file
    #
    # We allow some sensible combinations, e.g. --quiet --log [--debug]
    if config.quiet:
        stdout_level = "WARN"
    elif config.verbose or config.debug:
        stdout_level = "DEBUG"
    else:
        stdout_level = "INFO"

    if config.log:
        if config.debug:
            file_level = "DEBUG"
        else:
            file_level = "INFO"
    else:
        file_level = None

    logger.init(stdout_level, file_level, config.log_file)
