#!/usr/bin/env python
"""
Placeholder asset generator for the Shooter Game.

Run this script from a fresh checkout to create the sprites and sound
effects the game loads at start-up.
"""

import os
import sys

# Add the root directory to the path so we can import the game packages
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shooter.utils.asset_generator import AssetGenerator  # noqa: E402


def main():
    print("Shooter Game - Asset Generator")
    print("------------------------------")

    generated_files = AssetGenerator().generate_all()

    print(f"\nGenerated {len(generated_files)} assets:")
    for file_path in generated_files:
        print(f"  - {os.path.basename(file_path)}")


if __name__ == "__main__":
    main()
