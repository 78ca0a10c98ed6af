import os
import logging
import streamlit as st

# --- OTel & Observability Imports ---
from opentelemetry import trace
from opentelemetry._logs import set_logger_provider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource

# --- OTel Logging Imports ---
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter

# --- Prometheus Import ---
from prometheus_client import start_http_server

# --- Application Imports ---
from scopestyle.components import category_button, option_card
from scopestyle.presentation.session import flush_session_styles, session_registry


# --- 1. Configure Observability ---
def configure_observability():
    """
    Configures OpenTelemetry to send Traces and Logs via OTLP.
    Starts a background Prometheus server for Metrics.
    """
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    headers = os.getenv("OTEL_EXPORTER_OTLP_HEADERS")

    if not endpoint or not headers:
        print("⚠️ Observability Warning: OTEL env vars not set. Telemetry will not be exported.")
        return

    resource = Resource.create({"service.name": "scopestyle-demo"})

    # --- A. TRACING SETUP ---
    trace_provider = TracerProvider(resource=resource)
    otlp_trace_exporter = OTLPSpanExporter(endpoint=endpoint, headers=headers)
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_trace_exporter))
    trace.set_tracer_provider(trace_provider)

    # --- B. LOGGING SETUP ---
    logger_provider = LoggerProvider(resource=resource)
    otlp_log_exporter = OTLPLogExporter(endpoint=endpoint, headers=headers)
    logger_provider.add_log_record_processor(BatchLogRecordProcessor(otlp_log_exporter))
    set_logger_provider(logger_provider)

    handler = LoggingHandler(level=logging.INFO, logger_provider=logger_provider)
    logging.getLogger().addHandler(handler)

    # --- C. METRICS SETUP (Prometheus) ---
    try:
        start_http_server(8000)
        print("✅ Prometheus Metrics server started on port 8000")
    except OSError:
        print("⚠️ Prometheus port 8000 already in use (likely Streamlit reload). Skipping.")


# --- 2. Bootstrap Application ---

# Initialize Observability ONCE per session
if "observability_configured" not in st.session_state:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')

    configure_observability()
    st.session_state.observability_configured = True


CATEGORIES = [
    ("Safety", "🦺", "40%"),
    ("Load Diagrams", "📦", "75%"),
    ("Regulations", "📜", "10%"),
]


def main():
    st.set_page_config(page_title="scopestyle demo", layout="centered")

    registry = session_registry()

    st.title("Scoped styles")
    st.caption("Each component kind injects its CSS once, however often it renders.")

    active = st.radio("Active category", [label for label, _, _ in CATEGORIES])
    for label, icon, progress in CATEGORIES:
        category_button(label, progress, icon, is_active=(label == active), registry=registry)

    st.subheader("Options")
    for key_char, text in [("A", "Liquid"), ("B", "Gas"), ("C", "Architecture")]:
        option_card(key_char, text, registry=registry)

    # Streamlit redraws the page each run, so the <style> block is re-emitted
    flush_session_styles()

    with st.expander("Injected rules"):
        for report in registry.reports:
            st.write(report.model_dump())
        st.code("\n".join(registry.sheet.css_rules), language="css")


if __name__ == "__main__":
    main()
