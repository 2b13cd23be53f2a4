#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/subcommands/command_registry.py

from . import (
    catalog,
    enrich,
    match
)

SUBCOMMANDS = {
    'match': match,
    'enrich': enrich,
    'catalog': catalog
}
