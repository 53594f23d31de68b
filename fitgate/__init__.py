# -*- coding: utf-8 -*-
"""Fitness gateway backend."""

__version__ = "1.0.0"
