#!/usr/bin/env python3
"""
Example: Basic greeter usage

Builds two greeters through one registry, prints their greetings and shows
the construction count.

Usage:
    python examples/basic_usage.py
"""

from greeter import Greeter, GreeterRegistry


def main():
    registry = GreeterRegistry()

    g = registry.create("Ruby")
    g.greet(2)

    registry.create("Python").greet()

    print(f"Greeter v{Greeter.VERSION}: {registry.count} greeters constructed")


if __name__ == "__main__":
    main()
