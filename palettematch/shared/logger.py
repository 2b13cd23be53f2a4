#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/shared/logger.py

import sys
import argparse

from palettematch.core import config as c

# Levels written to stdout; everything else goes to stderr
_STDOUT_LEVELS = ("info", "success")


def log(level: str, message: str) -> None:
    """Print '[level] message', color-tagged by level."""
    tag = str(level).lower()
    out = sys.stdout if tag in _STDOUT_LEVELS else sys.stderr
    line = "{bold}[{tag}]{reset} {color}{msg}{reset}".format(
        bold=c.MSG_BOLD_COLORS.get(tag, c.RESET),
        color=c.MSG_COLORS.get(tag, c.RESET),
        reset=c.RESET,
        tag=tag,
        msg=message,
    )
    out.write(line + "\n")


class PaletteMatchArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Report through log() and exit with the CLI usage error code 2."""
        log("error", message)
        sys.exit(2)
