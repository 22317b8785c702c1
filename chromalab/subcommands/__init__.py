#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/subcommands/__init__.py
