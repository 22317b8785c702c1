#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/__init__.py
