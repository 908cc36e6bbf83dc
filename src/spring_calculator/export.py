"""CSV export of spring results, specification sheets and quotations."""

import csv
import io
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Union

from spring_calculator.config import SAMPLE_QUANTITY, FeatureSet
from spring_calculator.materials import MaterialType
from spring_calculator.models.inputs import SpringInputs
from spring_calculator.models.results import SpringResults
from spring_calculator.pricing import price_breaks

CURRENCY = "₹"
NOT_SPECIFIED = "Not specified"
CUSTOM_MATERIAL_LABEL = "Custom Material"

Row = Sequence[object]


def format_number(value: float) -> str:
    """Format a raw input the way it was typed: 2.0 → "2", 0.02 → "0.02"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _fixed(value: float) -> str:
    return f"{value:.2f}"


def material_label(material_name: str) -> str:
    """Material name for documents, "Custom Material" for the Custom preset or a blank name."""
    if not material_name or material_name == MaterialType.CUSTOM.value:
        return CUSTOM_MATERIAL_LABEL
    return material_name


def _to_csv(rows: List[Row]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def results_rows(
    inputs: SpringInputs, results: SpringResults, features: FeatureSet = FeatureSet.full()
) -> List[Row]:
    """
    Parameter / value / unit rows for the calculation results table.

    Derived values are rounded to two decimals; raw inputs are written as
    entered. Production and mechanical rows are included only when the
    corresponding feature is enabled.
    """
    rows: List[Row] = [
        ("Parameter", "Value", "Unit"),
        ("Wire Diameter", format_number(inputs.wire_diameter), "mm"),
        (f"Diameter ({inputs.diameter_type.value})", format_number(inputs.diameter), "mm"),
        ("Mean Diameter", _fixed(results.mean_diameter), "mm"),
        ("Total Coils", format_number(inputs.total_coils), ""),
        ("Active Coils", format_number(inputs.active_coils), ""),
        ("Free Length", format_number(inputs.free_length), "mm"),
        ("Load Height", format_number(inputs.load_height), "mm"),
        ("Material", inputs.material_name, ""),
        ("Material Cost", format_number(inputs.material_cost_per_kg), f"{CURRENCY}/kg"),
        ("Density", format_number(inputs.density), "g/cm³"),
        ("Shear Modulus (G)", format_number(inputs.shear_modulus), "MPa"),
        ("Wire Volume", _fixed(results.wire_volume), "mm³"),
        ("Spring Weight", _fixed(results.spring_weight), "g"),
        ("Raw Material Cost", _fixed(results.raw_material_cost), CURRENCY),
        ("Spring Rate", _fixed(results.spring_rate), "N/mm"),
        ("Load at L1", _fixed(results.load_at_load_height), "N"),
        ("Selling Price", _fixed(results.price_per_unit), CURRENCY),
    ]

    if FeatureSet.PRODUCTION in features:
        rows.extend(
            [
                ("Price per Spring", _fixed(results.price_per_unit), CURRENCY),
                ("Overall Selling Price", _fixed(results.overall_unit_price), CURRENCY),
                ("Total Wire Weight", _fixed(results.total_wire_weight), "kg"),
            ]
        )

    if FeatureSet.MECHANICAL in features:
        rows.extend(
            [
                ("Spring Index", _fixed(results.spring_index), ""),
                ("Wahl Factor", _fixed(results.wahl_factor), ""),
                ("Shear Stress", _fixed(results.shear_stress), "MPa"),
                ("Solid Length", _fixed(results.solid_length), "mm"),
                ("Pitch", _fixed(results.pitch), "mm"),
                ("Stress at Solid Length", _fixed(results.stress_at_solid_length), "MPa"),
            ]
        )
        if results.stress_ratio is not None:
            rows.append(("Stress Ratio", _fixed(results.stress_ratio * 100), "%"))
        rows.extend(
            [
                ("Natural Frequency", _fixed(results.natural_frequency), "Hz"),
                ("Resonant Frequency", _fixed(results.resonant_frequency), "Hz"),
                ("Energy Stored", _fixed(results.energy_stored), "N·mm"),
                ("Buckling Risk Ratio", _fixed(results.buckling_risk_ratio), ""),
                ("Relaxation Estimate", _fixed(results.relaxation_percent), "%"),
            ]
        )

    return rows


def results_csv(
    inputs: SpringInputs, results: SpringResults, features: FeatureSet = FeatureSet.full()
) -> str:
    """Calculation results as CSV text."""
    return _to_csv(results_rows(inputs, results, features))


def _with_tolerance(value: float, tolerance: float, features: FeatureSet) -> str:
    if FeatureSet.TOLERANCES in features:
        return f"{format_number(value)} ± {format_number(tolerance)}"
    return format_number(value)


def specification_rows(
    inputs: SpringInputs, results: SpringResults, features: FeatureSet = FeatureSet.full()
) -> List[Row]:
    """
    Rows of the specification sheet sent with a quotation.

    Contains the dimensions (with tolerances when enabled), descriptive fields
    and a price table for a sample lot and the production quantity.
    """
    rows: List[Row] = [
        ("Spring Specifications",),
        (
            "Wire Diameter (mm)",
            _with_tolerance(inputs.wire_diameter, inputs.wire_diameter_tolerance, features),
        ),
        (
            "Outer Diameter (mm)",
            _with_tolerance(results.outer_diameter, inputs.outer_diameter_tolerance, features),
        ),
        ("Inner Diameter (mm)", format_number(results.inner_diameter)),
        ("Mean Diameter (mm)", format_number(results.mean_diameter)),
    ]
    if FeatureSet.TOLERANCES in features:
        rows.append(
            (
                "Free Length (mm)",
                _with_tolerance(inputs.free_length, inputs.free_length_tolerance, features),
            )
        )
    rows.extend(
        [
            ("Total Coils", format_number(inputs.total_coils)),
            ("Active Coils", format_number(inputs.active_coils)),
            ("Material", material_label(inputs.material_name)),
            ("Coil Direction", inputs.coil_direction or NOT_SPECIFIED),
            ("Finish", inputs.finish or NOT_SPECIFIED),
            ("Ends", inputs.ends or NOT_SPECIFIED),
        ]
    )
    rows.append(("Additional Notes", inputs.notes) if inputs.notes else ())
    rows.append(())

    rows.append(("Price Analysis",))
    if FeatureSet.PRODUCTION in features:
        rows.append(
            ("Quantity", f"Price per Spring ({CURRENCY})", f"Total Price ({CURRENCY})")
        )
        for row in price_breaks(
            results.price_per_unit, inputs.setup_cost, (SAMPLE_QUANTITY, inputs.quantity)
        ):
            rows.append((row.quantity, _fixed(row.unit_price), _fixed(row.total_price)))
    else:
        rows.append((f"Price per Spring ({CURRENCY})", _fixed(results.price_per_unit)))

    return rows


def specification_csv(
    inputs: SpringInputs, results: SpringResults, features: FeatureSet = FeatureSet.full()
) -> str:
    """Specification sheet as CSV text."""
    return _to_csv(specification_rows(inputs, results, features))


@dataclass(frozen=True)
class CompanyDetails:
    """Contact block printed on a quotation, for the supplier or the client."""

    name: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    website: str = ""
    gst: str = ""


DEFAULT_SUPPLIER = CompanyDetails(
    name="ARVAT SPRINGTECH LLP",
    email="info@arvatspringtech.com",
    phone="+91 7600800472",
    address=(
        "Ground Floor, Godown No 60, Sunshine Industrial Hub - 1,\n"
        "Near Navapura Railway Crossing, Behind Pushkar Estate,\n"
        "Changodar, Ahmedabad-382213"
    ),
    website="www.arvatspringtech.com",
    gst="24ACGFA3396M1Z2",
)

QUOTATION_NOTES = (
    "Prices are exclusive of GST",
    "Specifications are subject to manufacturing tolerances",
)


@dataclass(frozen=True)
class QuotationDetails:
    """Commercial details of a quotation.

    Attributes:
        quotation_number: Reference number, "Not Specified" when blank
        quotation_date: Date of issue, today when None
        client: Customer contact block
        supplier: Issuing company contact block
        validity_period: How long the offer stands
        payment_terms: Payment schedule
        delivery_time: Promised lead time
    """

    quotation_number: str = ""
    quotation_date: Optional[date] = None
    client: CompanyDetails = field(default_factory=CompanyDetails)
    supplier: CompanyDetails = DEFAULT_SUPPLIER
    validity_period: str = ""
    payment_terms: str = "50% advance, 50% before dispatch"
    delivery_time: str = ""


def _rupees(value: float) -> str:
    return f"Rs. {value:.2f}"


def quotation_rows(
    inputs: SpringInputs, results: SpringResults, details: QuotationDetails
) -> List[Row]:
    """
    Rows of a customer quotation.

    Covers quotation and company details, the key spring specifications,
    pricing for the production quantity and the standard terms.
    ``Total Amount`` is the overall unit price times the quantity.
    """
    issued = details.quotation_date or date.today()
    supplier = details.supplier
    client = details.client
    return [
        ("Quotation Details",),
        ("Quotation Number", details.quotation_number or "Not Specified"),
        ("Date", issued.isoformat()),
        (),
        ("Company Details",),
        ("Company Name", supplier.name),
        ("Phone", supplier.phone),
        ("Email", supplier.email),
        ("Website", supplier.website),
        ("GST", supplier.gst),
        ("Address", supplier.address.replace("\n", " ")),
        (),
        ("Client Details",),
        ("Company Name", client.name),
        ("Contact Person", client.contact_person),
        ("Email", client.email),
        ("Phone", client.phone),
        ("Address", client.address),
        (),
        ("Spring Specifications",),
        ("Wire Diameter", f"{format_number(inputs.wire_diameter)} mm"),
        ("Outer Diameter", f"{results.outer_diameter:.2f} mm"),
        ("Free Length", f"{format_number(inputs.free_length)} mm"),
        ("Total Coils", format_number(inputs.total_coils)),
        ("Material", material_label(inputs.material_name)),
        ("Spring Rate", f"{results.spring_rate:.2f} N/mm"),
        ("Finish", inputs.finish or "Standard"),
        ("End Type", inputs.ends or "Standard"),
        (),
        ("Pricing Details",),
        ("Quantity", inputs.quantity),
        ("Price per Spring", _rupees(results.price_per_unit)),
        ("Overall Selling Price", _rupees(results.overall_unit_price)),
        ("Total Amount", _rupees(results.overall_unit_price * inputs.quantity)),
        (),
        ("Terms & Conditions",),
        ("Validity", details.validity_period),
        ("Payment Terms", details.payment_terms),
        ("Delivery Time", details.delivery_time),
        ("Note 1", QUOTATION_NOTES[0]),
        ("Note 2", QUOTATION_NOTES[1]),
    ]


def quotation_csv(
    inputs: SpringInputs, results: SpringResults, details: QuotationDetails
) -> str:
    """Quotation as CSV text."""
    return _to_csv(quotation_rows(inputs, results, details))


def quotation_filename(details: QuotationDetails) -> str:
    """File name for a quotation, "Draft" standing in for a missing number."""
    return f"Quotation_{details.quotation_number or 'Draft'}.csv"


def write_csv(text: str, path: Union[str, Path]) -> Path:
    """Write CSV text to ``path`` as UTF-8 and return the path."""
    path = Path(path)
    path.write_text(text, encoding="utf-8")
    return path
