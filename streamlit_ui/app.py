# app.py
import os

import requests
import streamlit as st
import streamlit.components.v1 as components

from payload import build_payload

# CHANGE THIS if the backend runs elsewhere:
BACKEND_URL = os.getenv("DOCGEN_BACKEND_URL", "http://127.0.0.1:8000")

st.set_page_config(
    page_title="Invoice & Receipt Designer",
    layout="wide",
    page_icon="🧾",
)

st.title("🧾 Invoice & Receipt Designer")


# ============================================================
# SIDEBAR → DOCUMENT SETTINGS
# ============================================================
st.sidebar.header("⚙️ Document")

try:
    catalogue = requests.get(f"{BACKEND_URL}/templates", timeout=3).json()
    template_keys = [t["key"] for t in catalogue]
except Exception:
    st.sidebar.warning("Backend not reachable, using built-in template list.")
    template_keys = ["classic", "modern", "minimal", "bold", "compact"]

kind = st.sidebar.radio("Document type", ["invoice", "receipt"], horizontal=True)
form = {
    "template": st.sidebar.selectbox("Template", template_keys),
    "currency_symbol": st.sidebar.selectbox("Currency", ["$", "₦", "£", "€", "₵", "KSh"]),
    "brand_color": st.sidebar.text_input("Brand colour (hex, optional)"),
    "document_number": st.sidebar.text_input("Document number (optional)"),
    "document_date": st.sidebar.text_input("Date (optional)"),
}
if kind == "receipt":
    form["amount_paid"] = st.sidebar.text_input("Amount paid (optional)")
    form["invoice_reference"] = st.sidebar.text_input("Invoice reference")
else:
    form["due_date"] = st.sidebar.text_input("Due date (optional)")


# ============================================================
# COMPANY / RECIPIENT / ITEMS
# ============================================================
left, right = st.columns(2)

with left:
    st.subheader("🏢 Company")
    form["company_name"] = st.text_input("Company name")
    form["company_address"] = st.text_input("Address")
    form["company_email"] = st.text_input("Email")
    form["company_phone"] = st.text_input("Phone")
    form["logo"] = st.text_input("Logo URL or data URI")
    form["signature"] = st.text_input("Signature URL or data URI")
    with st.expander("Bank details & terms"):
        form["bank_name"] = st.text_input("Bank")
        form["account_name"] = st.text_input("Account name")
        form["account_number"] = st.text_input("Account number")
        form["terms"] = st.text_area("Terms & conditions")

with right:
    st.subheader("👤 Recipient")
    form["recipient_name"] = st.text_input("Customer name")
    form["recipient_address"] = st.text_input("Customer address")
    form["recipient_contact"] = st.text_input("Customer contact")

    st.subheader("📦 Items")
    items_text = st.text_area(
        "One per line: description | qty | unit price",
        value="Consulting | 10 | 100\nLicense | 1 | 500",
        height=150,
    )


# ============================================================
# RENDER + PREVIEW
# ============================================================
if st.button("Render preview"):
    payload = build_payload(form, items_text, kind)
    try:
        res = requests.post(f"{BACKEND_URL}/render/{kind}", json=payload, timeout=30)
    except Exception as e:
        st.error(f"❌ Could not reach backend: {e}")
        st.stop()

    if res.status_code != 200:
        st.error("❌ Backend returned an error.")
        st.text(res.text)
        st.stop()

    st.session_state["html"] = res.text
    st.session_state["kind"] = kind

if "html" in st.session_state:
    st.subheader("📄 Preview")
    components.html(st.session_state["html"], height=1200, scrolling=True)
    st.download_button(
        "Download HTML",
        data=st.session_state["html"],
        file_name=f"{st.session_state['kind']}.html",
        mime="text/html",
    )
