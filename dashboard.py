import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from q_ary_search.parameters import SUPPORTED_ARITIES, QArySearchParameters
from q_ary_search.searches import ARITY_NAMES
from q_ary_search.data_loader import prepare_sorted_array
from q_ary_search.benchmark import benchmark_searches, query_range, threshold_sweep

st.set_page_config(page_title="Q-ary Search Benchmark Dashboard", layout="wide")

st.title("Q-ary Search Benchmark Dashboard")
st.markdown("Configure and benchmark Q-ary searches against `bisect` on random sorted arrays.")

st.sidebar.header("Configuration")

st.sidebar.subheader("Dataset")
data_type = st.sidebar.radio(
    "Value Type",
    options=["real", "int"],
    format_func=lambda x: "Real numbers" if x == "real" else "Integers",
    help="Type of the uniformly generated values"
)
dataset_size = st.sidebar.number_input(
    "Dataset Size",
    min_value=10,
    max_value=2000000,
    value=10000,
    step=1000,
    help="Length of the sorted array"
)
seed = st.sidebar.number_input("Random Seed", min_value=0, value=0, step=1)

st.sidebar.subheader("Queries")
start_q = st.sidebar.number_input("Start of Query Range", value=0, step=1000)
finish_q = st.sidebar.number_input("Finish of Query Range", value=100000, step=1000)
step_q = st.sidebar.number_input("Query Step", min_value=1, value=1, step=1)

st.sidebar.subheader("Arities to Benchmark")
selected_arities = [
    arity for arity in SUPPORTED_ARITIES
    if st.sidebar.checkbox(f"{arity}-ary ({ARITY_NAMES[arity]})", value=True, key=f"arity_{arity}")
]

st.sidebar.markdown("---")
st.sidebar.subheader("Linear Thresholds")
thresholds = {}
for arity in selected_arities:
    thresholds[arity] = st.sidebar.number_input(
        f"{arity}-ary threshold",
        min_value=arity,
        max_value=1024,
        value=2 * arity,
        key=f"threshold_{arity}",
        help="Minimal range length below which the search switches to linear scan"
    )

st.sidebar.markdown("---")
st.sidebar.subheader("Threshold Sweep")
sweep_arity = st.sidebar.selectbox("Arity", options=list(SUPPORTED_ARITIES), index=2)
sweep_max = st.sidebar.slider("Largest Threshold", min_value=sweep_arity + 1, max_value=256, value=64)

run_benchmark = st.sidebar.button("Run Benchmark", type="primary")

if 'results' not in st.session_state:
    st.session_state.results = None


def run_benchmark_pipeline():
    """Run the complete benchmark pipeline"""
    progress_bar = st.progress(0)
    status_text = st.empty()

    status_text.text("Generating sorted array...")
    data = prepare_sorted_array(int(dataset_size), start_q, finish_q, data_type, rng=int(seed))
    queries = query_range(start_q, finish_q, step_q)
    if not queries:
        st.error("The query range is empty.")
        return None
    progress_bar.progress(20)

    status_text.text(f"Running {len(queries):,} queries per method...")
    parameters = {arity: QArySearchParameters(arity, int(threshold)) for arity, threshold in thresholds.items()}
    results = benchmark_searches(data, queries, selected_arities, parameters)
    progress_bar.progress(70)

    status_text.text(f"Sweeping thresholds of the {sweep_arity}-ary search...")
    sweep_thresholds = np.unique(np.geomspace(sweep_arity, sweep_max, num=12).astype(int)).tolist()
    sweep = threshold_sweep(sweep_arity, data, queries, sweep_thresholds)

    progress_bar.progress(100)
    status_text.text("Benchmark complete!")

    result_df = pd.DataFrame([result.as_row() for result in results])
    sweep_df = pd.DataFrame({
        'Threshold': [r.to_linear_threshold for r in sweep],
        'Avg Time (µs)': [r.avg_time_us for r in sweep],
        'Avg Comparisons': [r.avg_comparisons for r in sweep],
    })
    return result_df, sweep_df, len(data), len(queries)


# Run benchmark when button is clicked
if run_benchmark:
    if finish_q <= start_q:
        st.warning("The finish of the query range must be above its start!")
    else:
        with st.spinner("Running benchmark..."):
            outcome = run_benchmark_pipeline()
            if outcome is not None:
                st.session_state.results, st.session_state.sweep, st.session_state.data_size, \
                    st.session_state.num_queries = outcome

# Display results
if st.session_state.results is not None:
    st.markdown("---")
    st.subheader("Benchmark Results")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Dataset Size", f"{st.session_state.data_size:,} values")
    with col2:
        st.metric("Queries per Method", f"{st.session_state.num_queries:,}")
    with col3:
        st.metric("Value Type", data_type)

    st.dataframe(st.session_state.results, use_container_width=True, hide_index=True)

    st.markdown("---")
    st.subheader("Performance Comparison")

    tab1, tab2 = st.tabs(["Average Time", "Average Comparisons"])

    with tab1:
        chart_data = st.session_state.results
        time_fig = go.Figure(go.Bar(
            x=chart_data['Method'],
            y=chart_data['Avg Time (µs)'],
            marker=dict(color='steelblue', line=dict(width=1, color='darkblue')),
            hovertemplate='%{x}<br>%{y:.3f} µs<extra></extra>'
        ))
        time_fig.update_layout(xaxis_title="Method", yaxis_title="Avg Time (µs)", height=400)
        st.plotly_chart(time_fig, use_container_width=True)

    with tab2:
        chart_data = st.session_state.results
        comps_fig = go.Figure(go.Bar(
            x=chart_data['Method'],
            y=chart_data['Avg Comparisons'],
            marker=dict(color='darkorange'),
            hovertemplate='%{x}<br>%{y:.2f} comparisons<extra></extra>'
        ))
        comps_fig.update_layout(xaxis_title="Method", yaxis_title="Avg Comparisons", height=400)
        st.plotly_chart(comps_fig, use_container_width=True)

    st.markdown("---")
    st.subheader("Threshold Sweep")
    sweep_df = st.session_state.sweep
    sweep_fig = go.Figure()
    sweep_fig.add_trace(go.Scatter(
        x=sweep_df['Threshold'],
        y=sweep_df['Avg Time (µs)'],
        mode='lines+markers',
        name='Avg Time (µs)',
        line=dict(color='steelblue', width=3),
    ))
    sweep_fig.add_trace(go.Scatter(
        x=sweep_df['Threshold'],
        y=sweep_df['Avg Comparisons'],
        mode='lines+markers',
        name='Avg Comparisons',
        yaxis='y2',
        line=dict(color='darkorange', width=2, dash='dash'),
    ))
    sweep_fig.update_layout(
        xaxis_title="Linear Threshold",
        xaxis_type="log",
        yaxis_title="Avg Time (µs)",
        yaxis2=dict(title="Avg Comparisons", overlaying='y', side='right'),
        height=450,
        hovermode='x unified',
        legend=dict(yanchor="top", y=0.99, xanchor="left", x=0.01)
    )
    st.plotly_chart(sweep_fig, use_container_width=True)

else:
    st.info("Configure your benchmark settings in the sidebar and click 'Run Benchmark' to start.")

    st.markdown("""
    ### How to Use

    1. **Configure Dataset**: Set the value type, dataset size and seed
    2. **Configure Queries**: Every value from the start to the finish of the query range, by the query step, is searched
    3. **Select Arities**: Choose which Q-ary searches to compare against `bisect`
    4. **Tune Thresholds**: Set the range length below which each arity falls back to linear scan
    5. **Run Benchmark**: Click the "Run Benchmark" button to start the evaluation
    6. **Analyze Results**: View the comparison table, the charts and the threshold sweep

    ### Trade-off

    - **Higher arity**: fewer narrowing steps, but up to Q-1 comparisons per step
    - **Higher threshold**: fewer steps, but a longer linear scan at the end
    """)
