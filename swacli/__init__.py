"""
swacli - static web app command-line helpers.
"""

VERSION = '1.0.0'
