import streamlit as st
from npi_calculator.backend_logic import *
from npi_calculator.io_form import *

# ------------------------
# Streamlit UI
# ------------------------

st.set_page_config(
    page_title="NPI Calculator | Nottingham Prognostic Index",
    page_icon="🩺",
    layout="centered",
)

st.title("NPI Calculator")
st.write(
    "Nottingham Prognostic Index for breast cancer, from tumour size, "
    "histological grade and lymph node stage."
)

# ------------------------
# Input form
# ------------------------

with st.form("npi_input_form"):
    tumour_size = st.number_input(
        "Tumour size (cm)",
        min_value=0.0,
        value=None,
        step=0.1,
        placeholder="Enter size",
    )

    grade = st.selectbox(
        "Histological grade",
        list(GRADE_OPTIONS.keys()),
        index=None,
        placeholder="Select grade",
        format_func=lambda v: option_label(v, GRADE_OPTIONS),
    )

    node_stage = st.selectbox(
        "Lymph node stage",
        list(NODE_STAGE_OPTIONS.keys()),
        index=None,
        placeholder="Select stage",
        format_func=lambda v: option_label(v, NODE_STAGE_OPTIONS),
    )

    submitted = st.form_submit_button("Calculate NPI", type="primary")


if submitted:
    try:
        npi_input = validate(tumour_size, grade, node_stage)
    except NpiValidationError as e:
        st.session_state.pop("npi_input", None)
        st.session_state.pop("npi_result", None)
        st.error(str(e))
    else:
        # Persist in session_state so the result survives reruns
        st.session_state["npi_input"] = npi_input
        st.session_state["npi_result"] = compute(npi_input)


# ------------------------
# Show result if we have it
# ------------------------

if "npi_result" in st.session_state:
    npi_input = st.session_state["npi_input"]
    result = st.session_state["npi_result"]

    st.markdown("---")
    col1, col2 = st.columns(2)
    with col1:
        st.metric("NPI", format_number(result.score))
    with col2:
        st.markdown(band_markdown(result))
        st.caption(survival_caption(result))

    st.code(describe_calculation(npi_input, result), language=None)


st.header("Prognosis bands")
st.dataframe(band_reference_table(), hide_index=True)

st.header("FAQ")

st.subheader("How is the NPI calculated?")
st.write(
    "NPI = 0.2 × tumour size (cm) + lymph node stage + histological grade. "
    "The score is shown unrounded and compared directly against the band limits."
)

st.subheader("What data do you collect or store?")
st.write(
    "None. Values are used for the on-screen calculation only and are cleared "
    "when you refresh or close the page."
)

st.subheader("Is this a diagnosis?")
st.write(
    "No. Survival figures are population estimates for each band and are for "
    "guidance only."
)
