# -*- coding: utf-8 -*-
"""Shared helpers."""
