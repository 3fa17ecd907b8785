"""Travel pace API with standardized responses."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Literal

from flask import Blueprint, Response, current_app, render_template, request

from common.errors import NotFoundAppError, ValidationAppError, ensure_app_error
from common.forms import get_bool, get_float, get_str
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    BadInputError,
    InvalidUnitError,
    SettingsStore,
    TravelRequest,
    UnknownMountError,
    calculate_travel,
    convert_distance,
    journey_card,
    journey_preview,
    journey_time,
    list_paces,
    load_settings,
    pace_speed_label,
    preview,
)
from ..core.constants import DistanceUnit, Pace

SETTINGS_EXTENSION = "travel_pace_settings"


class CalculatePayload(SchemaModel):
    mode: Literal["distance", "time"]
    pace: Pace = "normal"
    distance: float | None = None
    days: float = 0
    hours: float = 0
    minutes: float = 0
    total_minutes: float | None = None
    mount_id: str | None = None

    def to_request(self) -> TravelRequest:
        return TravelRequest(**self.model_dump())


class ConvertPayload(SchemaModel):
    value: float | int | str
    from_unit: DistanceUnit
    to_unit: DistanceUnit
    use_tabletop: bool = True
    decimals: int | None = None


class JourneyPreviewPayload(SchemaModel):
    speed: float
    on_road: float = 0
    off_road: float = 0
    ratio: float = 1
    use_metric: bool | None = None


class JourneyPayload(JourneyPreviewPayload):
    pace: Pace = "normal"
    include_days: bool = False


class SettingsPayload(SchemaModel):
    use_metric: bool | None = None
    show_effects: bool | None = None
    forced_march: bool | None = None
    enabled_mounts: dict[str, bool] | None = None
    preview: dict[str, Any] | None = None


api_bp = Blueprint("travel_pace_api", __name__, url_prefix="/api/travel_pace")
ui_bp = Blueprint(
    "travel_pace",
    __name__,
    url_prefix="/travel_pace",
    template_folder=str(Path(__file__).resolve().parent.parent / "templates"),
)


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _store() -> SettingsStore:
    store = current_app.extensions.get(SETTINGS_EXTENSION)
    if store is None:
        raw = dict(current_app.config.get("PLUGIN_SETTINGS", {}).get("travel_pace", {}) or {})
        override = current_app.config.get("TRAVEL_PACE_SETTINGS_FILE")
        if override:
            raw["settings_file"] = override
        if not current_app.config.get("TRAVEL_PACE_PERSIST_SETTINGS", True):
            raw.pop("settings_file", None)
        store = SettingsStore(load_settings(raw, root=_repo_root()))
        current_app.extensions[SETTINGS_EXTENSION] = store
    return store


def _use_metric(override: bool | None = None) -> bool:
    if override is not None:
        return override
    return bool(_store().get("use_metric"))


def _handle(callable_: Callable[[], Any]) -> Response:
    try:
        return ok(callable_())
    except ValidationAppError as exc:
        return fail(exc)
    except ValidationError as exc:
        return fail(ValidationAppError.from_exception(exc, code="travel_pace.invalid_request"))
    except UnknownMountError as exc:
        return fail(
            NotFoundAppError.from_exception(
                exc, code="travel_pace.unknown_mount", details={"mount_id": exc.mount_id}
            )
        )
    except InvalidUnitError as exc:
        return fail(ValidationAppError.from_exception(exc, code="travel_pace.invalid_unit"))
    except BadInputError as exc:
        return fail(ValidationAppError.from_exception(exc, code="travel_pace.invalid_input"))
    except Exception as exc:  # pragma: no cover - defensive path
        current_app.logger.exception("travel pace request failed")
        error = ensure_app_error(exc, fallback_code="travel_pace.internal")
        return fail(error, status=error.status_code)


@ui_bp.get("/")
def index() -> str:
    store = _store()
    use_metric = _use_metric()
    return render_template(
        "travel_pace/index.html",
        paces=list_paces(use_metric=use_metric),
        mounts=store.mount_registry().available(use_metric),
        distance_unit="km" if use_metric else "mi",
    )


@api_bp.get("/paces")
def paces() -> Response:
    def _call() -> dict[str, Any]:
        use_metric = _use_metric(get_bool(request.args, "metric", _use_metric()))
        mount_id = request.args.get("mount_id") or None
        items = list_paces(use_metric=use_metric)
        if mount_id:
            registry = _store().mount_registry()
            for item in items:
                item["speed"] = pace_speed_label(
                    str(item["id"]), use_metric=use_metric, mounts=registry, mount_id=mount_id
                )
        return {"paces": items, "use_metric": use_metric}

    return _handle(_call)


@api_bp.get("/mounts")
def mounts() -> Response:
    def _call() -> dict[str, Any]:
        use_metric = _use_metric()
        return {"mounts": _store().mount_registry().available(use_metric)}

    return _handle(_call)


@api_bp.post("/calculate")
def calculate_endpoint() -> Response:
    def _call() -> dict[str, Any]:
        payload = parse_model(CalculatePayload, request.get_json(silent=True))
        return calculate_travel(
            payload.to_request(),
            use_metric=_use_metric(),
            mounts=_store().mount_registry(),
        )

    return _handle(_call)


@api_bp.post("/preview")
def preview_endpoint() -> Response:
    def _call() -> dict[str, Any]:
        payload = parse_model(CalculatePayload, request.get_json(silent=True))
        text = preview(
            payload.to_request(),
            use_metric=_use_metric(),
            mounts=_store().mount_registry(),
        )
        return {"preview": text}

    return _handle(_call)


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    def _call() -> dict[str, Any]:
        payload = parse_model(ConvertPayload, request.get_json(silent=True))
        value = convert_distance(
            payload.value,
            payload.from_unit,
            payload.to_unit,
            use_tabletop=payload.use_tabletop,
        )
        if payload.decimals is not None:
            if payload.decimals < 0:
                raise BadInputError("Decimal precision must be non-negative.")
            value = round(value, payload.decimals)
        return {"value": value, "unit": payload.to_unit, "use_tabletop": payload.use_tabletop}

    return _handle(_call)


@api_bp.get("/convert")
def convert_query_endpoint() -> Response:
    def _call() -> dict[str, Any]:
        value = get_float(request.args, "value", None, field_name="value")
        if value is None:
            raise ValidationAppError(message="value is required", code="travel_pace.invalid_request")
        to_unit = get_str(request.args, "to", "ft") or "ft"
        use_tabletop = get_bool(request.args, "tabletop", True)
        converted = convert_distance(
            value,
            get_str(request.args, "from", "ft") or "ft",
            to_unit,
            use_tabletop=use_tabletop,
        )
        return {"value": converted, "unit": to_unit, "use_tabletop": use_tabletop}

    return _handle(_call)


@api_bp.post("/journey")
def journey_endpoint() -> Response:
    def _call() -> dict[str, Any]:
        payload = parse_model(JourneyPayload, request.get_json(silent=True))
        result = journey_time(
            payload.speed,
            payload.on_road,
            payload.off_road,
            payload.pace,
            payload.ratio,
            use_metric=_use_metric(payload.use_metric),
            include_days=payload.include_days,
        )
        _store().set(
            "preview",
            {
                "speed": payload.speed,
                "on_road": payload.on_road,
                "off_road": payload.off_road,
                "ratio": payload.ratio,
            },
        )
        return result.to_dict()

    return _handle(_call)


@api_bp.post("/journey/preview")
def journey_preview_endpoint() -> Response:
    def _call() -> dict[str, Any]:
        payload = parse_model(JourneyPreviewPayload, request.get_json(silent=True))
        times = journey_preview(
            payload.speed,
            payload.on_road,
            payload.off_road,
            payload.ratio,
            use_metric=_use_metric(payload.use_metric),
        )
        return {"times": times}

    return _handle(_call)


@api_bp.post("/card")
def card_endpoint() -> Response:
    def _call() -> dict[str, Any]:
        payload = parse_model(CalculatePayload, request.get_json(silent=True))
        store = _store()
        registry = store.mount_registry()
        use_metric = _use_metric()
        result = calculate_travel(payload.to_request(), use_metric=use_metric, mounts=registry)
        card = journey_card(
            result,
            use_metric=use_metric,
            show_effects=bool(store.get("show_effects")),
            forced_march=bool(store.get("forced_march")),
            mounts=registry,
        )
        html = render_template("travel_pace/card.html", card=card)
        return {"card": card, "html": html, "result": result}

    return _handle(_call)


@api_bp.get("/settings")
def settings_get() -> Response:
    return _handle(lambda: _store().as_dict())


@api_bp.put("/settings")
def settings_put() -> Response:
    def _call() -> dict[str, Any]:
        payload = parse_model(SettingsPayload, request.get_json(silent=True))
        store = _store()
        store.update(payload.model_dump(exclude_none=True))
        return store.as_dict()

    return _handle(_call)


blueprints = [ui_bp, api_bp]


__all__ = [
    "blueprints",
    "index",
    "paces",
    "mounts",
    "calculate_endpoint",
    "preview_endpoint",
    "convert_endpoint",
    "convert_query_endpoint",
    "journey_endpoint",
    "journey_preview_endpoint",
    "card_endpoint",
    "settings_get",
    "settings_put",
]
