"""
Parcel Locker Network Financial Model - Engine UI
A minimal Streamlit interface that uses the engine as the single source of truth
"""

import hashlib
import logging

import streamlit as st

from components.assumptions_sidebar import render_assumptions_sidebar
from components.projections_tab import render_projections_tab
from components.valuation_tab import render_valuation_tab
from engine.compute import compute
from engine.scenarios import run_scenarios
from utils.persistence import dumps_assumptions


st.set_page_config(
    page_title="Parcel Locker Financial Model",
    page_icon="📦",
    layout="wide"
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)


def hash_config(a):
    """Create hash of the assumption set for caching"""
    return hashlib.md5(dumps_assumptions(a).encode("utf-8")).hexdigest()


def load_model(a, store):
    """Run the engine and the scenario presets once per assumption hash"""
    cfg_hash = hash_config(a)
    cached = store.get('engine')
    if cached is None or cached.get('hash') != cfg_hash:
        # SINGLE call to engine, plus the presets derived from it
        cached = {
            'res': compute(a),
            'scenarios': run_scenarios(a),
            'hash': cfg_hash,
        }
        store['engine'] = cached
    return cached


def main():
    a = render_assumptions_sidebar()

    st.title(f"📦 {a.company_name or 'Parcel Locker Network'} – Financial Model")
    st.caption("Five-year projections, valuation and break-even for a locker and drop-box network")

    model = load_model(a, st.session_state)
    res = model['res']

    for msg in res.warnings:
        st.warning(msg)

    tab1, tab2 = st.tabs(["📈 Projections", "📊 Valuation & Break-Even"])
    with tab1:
        render_projections_tab(res)
    with tab2:
        render_valuation_tab(res, model['scenarios'])


if __name__ == "__main__":
    main()
