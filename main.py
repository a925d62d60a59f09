#!/usr/bin/env python3
"""
Monty Hall Live Lab - play the paradox and measure stay vs switch
"""

from montyhall.cli.interface import InteractiveCLI


def main():
    """Main entry point for the Monty Hall lab."""
    cli = InteractiveCLI()
    cli.run()


if __name__ == '__main__':
    main()
