"""Allows running ginger with python -m ginger"""
import sys

from ginger.main import main

sys.exit(main())
