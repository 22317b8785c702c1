#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/shared/__init__.py
