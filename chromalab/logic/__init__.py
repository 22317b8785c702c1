#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/logic/__init__.py
