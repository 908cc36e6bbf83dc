"""Basic usage example.

This example demonstrates:
- Describing a compression spring with SpringInputs
- Running the engine and handling field errors
- Displaying geometry, load and price results
- Exporting the results sheet as CSV

This is the simplest way to use the spring calculator.
"""

from pathlib import Path

import matplotlib.pyplot as plt

from spring_calculator import DiameterType, SpringEngine, SpringInputs
from spring_calculator.export import write_csv
from spring_calculator.visualize import plot_summary


def main():
    """Basic usage example with given values."""

    print("=" * 80)
    print("BASIC SPRING CALCULATOR USAGE")
    print("=" * 80)

    # 2 mm music wire wound to a 10 mm outside diameter
    # total_coils includes the closed end coils, active_coils does not
    inputs = SpringInputs(
        wire_diameter=2.0,  # mm
        diameter=10.0,  # mm
        diameter_type=DiameterType.OUTER,
        total_coils=10,
        active_coils=8,
        free_length=50.0,  # mm
        load_height=40.0,  # mm, compressed working height
    )

    print("\nInput Configuration:")
    print(f"  Wire: {inputs.wire_diameter} mm {inputs.material_name}")
    print(f"  {inputs.diameter_type.value.title()} diameter: {inputs.diameter} mm")
    print(f"  Coils: {inputs.total_coils} total, {inputs.active_coils} active")
    print(f"  Free length: {inputs.free_length} mm, load height: {inputs.load_height} mm")

    engine = SpringEngine()

    # A spring that cannot be wound is reported field by field
    bad = SpringInputs(wire_diameter=3.0, diameter=8.0, active_coils=12)
    print("\nRejected inputs:")
    for field, message in engine.recompute(bad).errors.items():
        print(f"  {field:<16} {message}")

    print("\nCalculating...")
    outcome = engine.recompute(inputs)
    results = outcome.results
    print("Done!\n")

    print("Geometry:")
    print("  " + "-" * 70)
    print(f"  Mean diameter:      {results.mean_diameter:.2f} mm")
    print(
        f"  Spring index:       {results.spring_index:.2f} "
        f"({results.spring_index_rating.value})"
    )
    print(f"  Solid length:       {results.solid_length:.2f} mm")
    print(f"  Wire length:        {results.wire_length:.2f} mm")

    print("\nLoad:")
    print("  " + "-" * 70)
    print(f"  Spring rate:        {results.spring_rate:.2f} N/mm")
    print(f"  Load at L1:         {results.load_at_load_height:.2f} N")
    print(f"  Shear stress:       {results.shear_stress:.1f} MPa")
    print(f"  Buckling risk:      {'yes' if results.buckling_risk else 'no'}")

    print("\nPrice:")
    print("  " + "-" * 70)
    print(f"  Spring weight:      {results.spring_weight:.2f} g")
    print(f"  Raw material cost:  {results.raw_material_cost:.2f}")
    print(f"  Price per spring:   {results.price_per_unit:.2f}")
    print(f"  Overall unit price: {results.overall_unit_price:.2f} (x{inputs.quantity})")

    csv_path = Path(__file__).parent / "basic_usage_results.csv"
    write_csv(engine.export_results(inputs, results), csv_path)
    print(f"\n  Results saved: {csv_path}")

    print("\n" + "=" * 80)
    print("GENERATING PLOT")
    print("=" * 80)
    plot_path = Path(__file__).parent / "basic_usage_plot.png"
    fig = plot_summary(
        outcome.load_curve,
        outcome.price_curve,
        inputs,
        results,
        show=False,
        save_path=str(plot_path),
    )
    plt.close(fig)
    print(f"  Plot saved: {plot_path}")
    print()


if __name__ == "__main__":
    main()
