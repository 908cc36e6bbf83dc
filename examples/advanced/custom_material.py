"""Custom material configuration example.

This example demonstrates:
- Using the built-in wire material presets
- Defining a custom material with its own density, modulus and cost
- Comparing how the material changes rate, stress and price
- Checking stress against tensile strength where it is known

Shows how to adapt the calculator to the wire you actually buy.
"""

from pathlib import Path

import matplotlib.pyplot as plt

from spring_calculator import SpringEngine, SpringInputs
from spring_calculator.materials import (
    MaterialType,
    create_custom_material,
    create_material_config,
)
from spring_calculator.visualize import plot_summary


def analyze_material(engine, base_inputs, material, save_plot=False):
    """Analyze the reference spring wound from a given material.

    Args:
        engine: SpringEngine instance
        base_inputs: SpringInputs describing the geometry
        material: MaterialConfig to apply
        save_plot: If True, generate and save a summary plot
    """
    inputs = base_inputs.with_material(material)
    outcome = engine.recompute(inputs)
    results = outcome.results

    print(f"\n{material.name} ({material.grade or 'no grade'})")
    print("  " + "-" * 70)
    print(
        f"  Density: {material.density} g/cm³, G: {material.shear_modulus:g} MPa, "
        f"cost: {material.cost_per_kg:g}/kg"
    )
    print(f"  Spring rate: {results.spring_rate:.2f} N/mm")
    print(f"  Load at L1: {results.load_at_load_height:.1f} N")
    print(f"  Shear stress: {results.shear_stress:.1f} MPa")
    if results.stress_ratio is not None:
        print(f"  Stress / UTS: {results.stress_ratio:.2f}")
    print(f"  Relaxation estimate: {results.relaxation_percent:g}%")
    print(f"  Price per spring: {results.price_per_unit:.2f}")

    if save_plot:
        slug = material.name.lower().replace(" ", "_")
        plot_path = Path(__file__).parent / f"custom_material_{slug}.png"
        fig = plot_summary(
            outcome.load_curve,
            outcome.price_curve,
            inputs,
            results,
            title=material.name,
            show=False,
            save_path=str(plot_path),
        )
        plt.close(fig)
        print(f"  Plot saved: {plot_path}")


def main():
    """Compare different wire materials."""

    print("=" * 80)
    print("CUSTOM MATERIAL CONFIGURATION")
    print("=" * 80)
    print("\nThis example shows how the wire material affects load and price.\n")

    base_inputs = SpringInputs(wire_diameter=1.5, diameter=12.0, active_coils=6, total_coils=8)
    engine = SpringEngine()

    print("=" * 80)
    print("PRESETS")
    print("=" * 80)
    for material_type in (
        MaterialType.STEEL_ASTM_A228,
        MaterialType.STAINLESS_STEEL_302,
        MaterialType.PHOSPHOR_BRONZE,
        MaterialType.INCONEL_X750,
    ):
        analyze_material(engine, base_inputs, create_material_config(material_type))

    print("\n" + "=" * 80)
    print("CUSTOM WIRE")
    print("=" * 80)
    beryllium_copper = create_custom_material(
        name="Beryllium Copper",
        density=8.26,
        shear_modulus=48300,
        cost_per_kg=1800,
        ultimate_tensile_strength=1250,
    )
    analyze_material(engine, base_inputs, beryllium_copper, save_plot=True)


if __name__ == "__main__":
    main()
