import threading
from collections.abc import Callable
from typing import Any

from opentelemetry import trace
from pydantic import BaseModel

from scopestyle.adapters import create_sheet
from scopestyle.config import StyleConfig
from scopestyle.domain.identity import identity_of, prefix_of
from scopestyle.domain.ports import IStyleSheet, StyleSheetError
from scopestyle.domain.style import Style
from scopestyle.shared.telemetry import RULES_FAILED, RULES_INSERTED, Telemetry, measure_time

tracer = trace.get_tracer(__name__)


class InjectionReport(BaseModel):
    """Outcome of one injection batch (all rules of one component kind)."""

    kind: str
    identity: int
    prefix: str
    start_index: int
    rules_inserted: int = 0
    rules_failed: int = 0


class InjectedSet:
    """
    Identities whose rules are already in the stylesheet.
    ``add_if_absent`` is the single check-and-claim step; the lock makes it
    safe when hosts (like Streamlit) render on several threads.
    """

    def __init__(self) -> None:
        self._ids: set[int] = set()
        self._lock = threading.Lock()

    def add_if_absent(self, identity: int) -> bool:
        with self._lock:
            if identity in self._ids:
                return False
            self._ids.add(identity)
            return True

    def discard(self, identity: int) -> None:
        with self._lock:
            self._ids.discard(identity)

    def __contains__(self, identity: object) -> bool:
        return identity in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    # --- SERIALIZATION LOGIC (Pickle Safety) ---
    def __getstate__(self) -> dict[str, Any]:
        """Locks cannot be pickled; drop it and rebuild on restore."""
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()


class StyleRegistry:
    """
    Responsible for:
    1. Remembering which component kinds already have their CSS in the page.
    2. Owning the (lazily created) live stylesheet.
    3. Appending a kind's rules exactly once, in first-use order.
    """

    def __init__(
        self, sheet_factory: Callable[[], IStyleSheet] | None = None
    ) -> None:
        self.telemetry = Telemetry("StyleRegistry")
        self._sheet_factory = sheet_factory or (
            lambda: create_sheet(StyleConfig.get_sink_kind())
        )
        self._sheet: IStyleSheet | None = None
        self._injected = InjectedSet()
        self.reports: list[InjectionReport] = []
        # Guards sheet creation and keeps one batch contiguous; re-entrant
        # because builders may style other kinds while a batch is open
        self._lock = threading.RLock()

    @property
    def sheet(self) -> IStyleSheet:
        """The live stylesheet, created on first access."""
        with self._lock:
            if self._sheet is None:
                self._sheet = self._sheet_factory()
                self.telemetry.log_info(
                    "Stylesheet created", sheet=type(self._sheet).__name__
                )
            return self._sheet

    @property
    def injected_count(self) -> int:
        return len(self._injected)

    def is_injected(self, kind_name: str) -> bool:
        return identity_of(kind_name) in self._injected

    def ensure_injected(
        self, kind_name: str, build_style: Callable[[], Style]
    ) -> InjectionReport | None:
        """
        Injects the kind's rules unless that already happened.
        Returns the report of the batch, or None when it was a no-op.
        """
        identity = identity_of(kind_name)
        if not self._injected.add_if_absent(identity):
            return None

        try:
            style = build_style()
        except Exception:
            # Builder errors propagate and leave the kind unclaimed
            self._injected.discard(identity)
            raise

        try:
            sheet = self.sheet
        except Exception as e:
            # Sink unavailable: not fatal, and the kind stays unclaimed for a retry
            self._injected.discard(identity)
            self.telemetry.log_error("Stylesheet unavailable", e, kind=kind_name)
            return None

        return self._inject(kind_name, identity, style, sheet)

    @measure_time("Inject Component Style")
    def _inject(
        self, kind_name: str, identity: int, style: Style, sheet: IStyleSheet
    ) -> InjectionReport:
        Telemetry.start_trace()
        prefix = prefix_of(kind_name)
        rules = style.rules(prefix)

        with self._lock:
            report = self._insert_batch(kind_name, identity, prefix, rules, sheet)

        RULES_INSERTED.labels(kind=kind_name).inc(report.rules_inserted)
        self.telemetry.log_info(
            "Injected component style",
            kind=kind_name,
            prefix=prefix,
            inserted=report.rules_inserted,
            failed=report.rules_failed,
        )
        return report

    def _insert_batch(
        self,
        kind_name: str,
        identity: int,
        prefix: str,
        rules: list[str],
        sheet: IStyleSheet,
    ) -> InjectionReport:
        """Appends one kind's rules. Caller holds the registry lock."""
        report = InjectionReport(
            kind=kind_name,
            identity=identity,
            prefix=prefix,
            start_index=len(sheet.css_rules),
        )

        with tracer.start_as_current_span("scopestyle.inject") as span:
            span.set_attribute("scopestyle.kind", kind_name)

            for rule in rules:
                try:
                    sheet.insert_rule(rule, len(sheet.css_rules))
                    report.rules_inserted += 1
                except StyleSheetError as e:
                    # Skip the rule, keep going; the kind stays recorded.
                    report.rules_failed += 1
                    RULES_FAILED.labels(kind=kind_name).inc()
                    self.telemetry.log_error(
                        "Rule rejected by stylesheet", e, kind=kind_name, rule=rule
                    )

            span.set_attribute("scopestyle.rules_inserted", report.rules_inserted)
            span.set_attribute("scopestyle.rules_failed", report.rules_failed)

        self.reports.append(report)
        return report


_default_registry: StyleRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> StyleRegistry:
    """Process-wide registry used when a component is styled without one."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = StyleRegistry()
        return _default_registry
