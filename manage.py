#!/usr/bin/env python
"""Command-line entry point for the portfolio backend."""
import os
import sys


def main():
    # Local settings unless DJANGO_SETTINGS_MODULE says otherwise
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.local')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Make sure it's installed and "
            "available on your PYTHONPATH. Activate your virtualenv if needed."
        ) from exc

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
