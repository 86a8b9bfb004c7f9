#!/usr/bin/env python3
"""Runner mínimo para el 'bombo': selecciona ganadores desde un archivo de texto.

Example:
  python run_bombo.py participants.txt 3 --seed 42

"""
import sys

from bombo.cli import main

if __name__ == '__main__':
    sys.exit(main())
