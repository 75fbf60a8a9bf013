#!/usr/bin/env python3
"""Example usage of the fibcursor library.

This example walks the shared cursor forward and back the way the HTTP
endpoints do.
"""

import logging
from fibcursor import SharedCursor

# Setup logging to see what's happening
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def main():
    """Main example function."""
    shared = SharedCursor()

    print("fibcursor - Example Usage")
    print("=" * 50)

    print("\nAdvancing ten times:")
    print("  " + ", ".join(shared.advance() for _ in range(10)))

    print("\nStepping back three times:")
    print("  " + ", ".join(shared.retreat() for _ in range(3)))

    print(f"\nCurrent term: {shared.peek()}")

if __name__ == "__main__":
    main()
