# -*- coding: utf-8 -*-
"""Interactive diff viewer."""
