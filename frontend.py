import streamlit as st
import pandas as pd
from pathlib import Path

from simulator.config import (
    DATA_DIR, RESULTS_DIR, DEFAULT_NUMBER_OF_DRIVERS, DEFAULT_ROUTE_START_TIME,
    DEFAULT_MAX_HOURS_PER_DRIVER, RECENT_RESULTS_LIMIT
)
from simulator.exceptions import SimulatorError, ResultNotFoundError
from simulator.io import DataLoader, ResultStore
from simulator.io.loader import DRIVERS_FILENAME, ROUTES_FILENAME, ORDERS_FILENAME
from simulator.models import RunParameters
from simulator.simulation import (
    simulate, select_active_drivers, ParameterValidator, InputValidator
)

# ---- CONFIG ----
st.set_page_config(
    page_title="Delivery Simulation Dashboard",
    page_icon="🚚",
    layout="wide",
    initial_sidebar_state="expanded"
)

DATA_PATH = Path(DATA_DIR)
DRIVERS_FILE = DATA_PATH / DRIVERS_FILENAME
ROUTES_FILE = DATA_PATH / ROUTES_FILENAME
ORDERS_FILE = DATA_PATH / ORDERS_FILENAME

# ---- CUSTOM CSS ----
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f77b4;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)

# ---- HELPER FUNCTIONS ----
def get_data_status():
    """Check which data files exist"""
    return {
        "drivers_exists": DRIVERS_FILE.exists(),
        "routes_exists": ROUTES_FILE.exists(),
        "orders_exists": ORDERS_FILE.exists(),
    }

def run_simulation(number_of_drivers, route_start_time, max_hours_per_driver):
    """Load data, run the engine and store the result"""
    params = RunParameters(
        number_of_drivers=number_of_drivers,
        route_start_time=route_start_time,
        max_hours_per_driver=max_hours_per_driver,
    )
    issues = ParameterValidator.validate(params)
    if issues:
        for issue in issues:
            st.error(issue)
        return None

    try:
        drivers, routes, orders = DataLoader.load_dataset(DATA_DIR)
        for issue in InputValidator(drivers, routes, orders).validate():
            st.warning(issue)
        result = simulate(
            select_active_drivers(drivers, number_of_drivers), routes, orders, params
        )
    except SimulatorError as e:
        st.error(f"Simulation failed: {e}")
        return None

    ResultStore(RESULTS_DIR).save(result)
    return result

def orders_dataframe(result):
    """Per-order results as a table"""
    return pd.DataFrame([order.to_dict() for order in result.per_order])

def drivers_dataframe(result):
    """Driver workloads as a table"""
    rows = []
    for workload in result.drivers:
        rows.append({
            "Driver": workload.name,
            "Fatigued": "😴" if workload.fatigued else "",
            "Assigned Minutes": workload.assigned_minutes,
            "Orders": len(workload.assigned_orders),
            "Utilization": f"{workload.utilization:.0%}",
            "Over Max Hours": "⚠️" if workload.exceeds_max_hours else "",
        })
    return pd.DataFrame(rows)

# ---- HEADER ----
st.markdown('<div class="main-header">🚚 Delivery Simulation Dashboard</div>', unsafe_allow_html=True)
st.markdown('<div class="sub-header">Assign orders to drivers and track profit, efficiency and fuel cost</div>', unsafe_allow_html=True)

data_status = get_data_status()

# ============ SIDEBAR ============
st.sidebar.title("📋 Data Status")

for label, key in [("Drivers", "drivers_exists"), ("Routes", "routes_exists"), ("Orders", "orders_exists")]:
    st.sidebar.markdown(f"{'✅' if data_status[key] else '❌'} {label}")

if not all(data_status.values()):
    st.sidebar.info("Create sample data first:\n```bash\npython -m simulator.main seed\n```")

st.sidebar.markdown("---")
st.sidebar.markdown("### ⚙️ Run Simulation")

with st.sidebar.form("simulation_form"):
    number_of_drivers = st.number_input("Number of drivers", min_value=1, value=DEFAULT_NUMBER_OF_DRIVERS, step=1)
    route_start_time = st.text_input("Route start time", value=DEFAULT_ROUTE_START_TIME)
    max_hours_per_driver = st.number_input("Max hours per driver", min_value=1.0, value=float(DEFAULT_MAX_HOURS_PER_DRIVER), step=0.5)
    submitted = st.form_submit_button("▶️ Run")

if submitted:
    with st.spinner("Running simulation..."):
        if run_simulation(int(number_of_drivers), route_start_time, float(max_hours_per_driver)):
            st.sidebar.success("✅ Simulation complete")

# ============ MAIN CONTENT ============
store = ResultStore(RESULTS_DIR)

try:
    result = store.latest()
except ResultNotFoundError:
    st.warning("⚠️ No simulations found. Run one from the sidebar.")
    st.code("python -m simulator.main run", language="bash")
    st.stop()
except SimulatorError as e:
    st.error(f"❌ Could not read stored simulations: {e}")
    st.stop()

st.caption(f"Latest simulation: {result.created_at}")

# ---- KPI OVERVIEW ----
kpis = result.kpis
col1, col2, col3, col4 = st.columns(4)

with col1:
    st.metric("Total Profit", f"Rs {kpis.total_profit:,}")

with col2:
    st.metric("Efficiency", f"{kpis.efficiency:.2f}%")

with col3:
    st.metric("On-Time", f"{kpis.on_time_deliveries}/{kpis.total_deliveries}")

with col4:
    st.metric("Fuel Cost", f"Rs {sum(kpis.fuel_cost_breakdown.values()):,.0f}")

st.markdown("---")

chart_col, drivers_col = st.columns(2)

with chart_col:
    st.subheader("⛽ Fuel Cost by Traffic Level")
    fuel_df = pd.DataFrame(
        {"Fuel Cost": list(kpis.fuel_cost_breakdown.values())},
        index=list(kpis.fuel_cost_breakdown.keys())
    )
    st.bar_chart(fuel_df)

with drivers_col:
    st.subheader("👥 Driver Workload")
    st.dataframe(drivers_dataframe(result), hide_index=True, use_container_width=True)

if result.warnings:
    st.markdown("### ⚠️ Warnings")
    for warning in result.warnings:
        st.warning(warning)

st.subheader("📦 Orders (highest value first)")
st.dataframe(orders_dataframe(result), hide_index=True, use_container_width=True)

# ---- HISTORY ----
st.markdown("---")
st.subheader("🗂️ Recent Simulations")

history = store.recent(RECENT_RESULTS_LIMIT)
history_df = pd.DataFrame([
    {
        "Created": r.created_at,
        "Drivers": r.inputs.number_of_drivers,
        "Start": r.inputs.route_start_time,
        "Profit": r.kpis.total_profit,
        "Efficiency %": r.kpis.efficiency,
        "On-Time": r.kpis.on_time_deliveries,
        "Deliveries": r.kpis.total_deliveries,
    }
    for r in history
])
st.dataframe(history_df, hide_index=True, use_container_width=True)
