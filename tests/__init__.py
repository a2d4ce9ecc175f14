#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test package for the route-planning demos.

Puts the project root on sys.path so the flat packages (envs, planners,
tours, cli) import when pytest is run from anywhere, e.g. `pytest tests/`.
"""

import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
