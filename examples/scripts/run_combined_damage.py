"""
Combined damage example.

Runs the example configuration and prints the composite damage at every
evaluation point for each step.

This can be run directly without any setup.
"""

from pathlib import Path

# Add parent to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from combined_damage import DamageSimulation, combine_damage


CONFIG_PATH = Path(__file__).parent.parent / "configs" / "combined_damage.yaml"


def single_point_examples():
    """Evaluate the combination rules at one point."""
    print("Single point combinations:")
    print("  Maximum:", combine_damage(0.2, [0.3, 0.7, 0.1], "Maximum"))
    print("  Product:", combine_damage(0.0, [0.5, 0.5], "Product", max_damage=0.9))
    print("  Product capped:", combine_damage(0.0, [0.9, 0.9], "Product", max_damage=0.5))
    print()


def main():
    single_point_examples()

    with DamageSimulation(str(CONFIG_PATH)) as simulation:
        history = simulation.run()

    print()
    print(history["combined"].to_pandas().round(4))
    print()
    print(history["envelope"].to_pandas().round(4))


if __name__ == "__main__":
    main()
