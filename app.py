import logging

import streamlit as st

from stresscalc.units import UnitSystem, Units, unit_options, convert_between_systems, Quantity
from stresscalc.model import StressType, field_specs
from stresscalc.formulas import format_stress_value, formula_explanation, format_number
from stresscalc.calculator import calculate, default_units, CALCULATION_FIELD
from stresscalc.validation import errors_by_field
from stresscalc.reporting import ReportMeta, clipboard_text, result_frame, make_result_pdf

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

st.set_page_config(page_title="Stress Calculator", layout="wide")
st.title("Stress Calculator")
st.caption("Normal, shear, bending, torsional and thermal stress from closed-form formulas.")

# ---------- Units ----------
u_choice = st.sidebar.selectbox("Unit system", [UnitSystem.METRIC.value, UnitSystem.IMPERIAL.value], index=0)
units = Units(UnitSystem(u_choice))
st.sidebar.info(
    f"{units.name} base units: force={units.force}, length={units.length}, area={units.area}, "
    f"moment={units.moment}, stress={units.stress}"
)

stress_type = StressType(st.sidebar.selectbox("Stress type", [s.value for s in StressType], index=0))

st.subheader("Formula")
st.markdown(f"**{formula_explanation(stress_type)}**")

# ---------- Inputs ----------
st.subheader("Input parameters")
defaults = default_units(stress_type, units.system)
raw_inputs = {}
chosen_units = {}
cols = st.columns(len(field_specs(stress_type)))
for col, spec in zip(cols, field_specs(stress_type)):
    raw_inputs[spec.name] = col.text_input(spec.label, value="", key=f"in_{stress_type.value}_{spec.name}")
    if spec.quantity is not None:
        options = unit_options(units.system, spec.quantity)
        chosen_units[spec.name] = col.selectbox(
            f"{spec.label} unit", options, index=options.index(defaults[spec.name]),
            key=f"unit_{units.system.value}_{stress_type.value}_{spec.name}",
        )
    elif spec.name == "elasticModulus":
        col.caption(f"in {units.stress}")
    else:
        col.caption(f"per {units.temperature}")

# ---------- Session State ----------
# a result is only valid for the inputs and units it was computed from
input_key = (
    units.system.value,
    stress_type.value,
    tuple(sorted(raw_inputs.items())),
    tuple(sorted(chosen_units.items())),
)
if st.session_state.get("input_key") != input_key:
    st.session_state.input_key = input_key
    st.session_state.outcome = None

c1, c2 = st.columns([1, 5])
if c1.button(f"Calculate {stress_type.value} stress"):
    st.session_state.outcome = calculate(stress_type, raw_inputs, chosen_units, units.system)
if c2.button("Clear result"):
    st.session_state.outcome = None

outcome = st.session_state.outcome
if outcome is None:
    st.info("Enter values above to see calculation results.")
    st.stop()

field_errors = errors_by_field(outcome.errors)
if CALCULATION_FIELD in field_errors:
    st.error(field_errors.pop(CALCULATION_FIELD))
for spec in field_specs(stress_type):
    if spec.name in field_errors:
        st.error(field_errors[spec.name])
if not outcome.ok:
    st.stop()

# ---------- Result ----------
res = outcome.result
st.subheader("Calculation result")
if not res.is_finite:
    st.warning("Degenerate inputs: the result is not a finite number.")
m1, m2 = st.columns(2)
m1.metric("Stress", format_stress_value(res.value, res.unit))
other = UnitSystem.IMPERIAL if units.system == UnitSystem.METRIC else UnitSystem.METRIC
m2.metric(
    f"Stress ({Units(other).stress})",
    format_stress_value(convert_between_systems(res.value, units.system, other, Quantity.STRESS), Units(other).stress),
)
st.caption(res.formula)

df = result_frame(res)
df["value"] = [format_number(v) for v in df["value"]]
st.dataframe(df, use_container_width=True)

st.markdown("**Copy result**")
st.code(clipboard_text(res), language=None)

pdf_bytes = make_result_pdf(res, ReportMeta(units_note=f"{units.name}, stress in {units.stress}"))
st.download_button("Download PDF report", data=pdf_bytes, file_name="stress_report.pdf", mime="application/pdf")
