"""Application factory for the Travel Pace server."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Iterable

import yaml
from flask import Flask, render_template, url_for

from common.logging import install_request_logging

from . import config as config_module
from .blueprints import register_plugin_blueprints

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"


def _load_yaml_config(path: Path = CONFIG_PATH) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _discover_plugins(package: str = "plugins") -> Iterable[str]:
    """Yield import paths for all plugin packages."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return []
    for module_info in pkgutil.iter_modules([str(package_path)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def _load_manifests() -> list[dict[str, str]]:
    manifests: list[dict[str, str]] = []
    for dotted in _discover_plugins():
        module = importlib.import_module(dotted)
        manifest = getattr(module, "manifest", None)
        if manifest:
            manifests.append(dict(manifest))
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, static_folder="ui/static", template_folder="ui/templates")
    app.config.from_object(config_module.BaseConfig)

    yaml_config = _load_yaml_config()
    app.config["SITE_SETTINGS"] = yaml_config.get("site", {}) or {}
    plugin_settings = yaml_config.get("plugins", {}) or {}
    app.config["PLUGIN_SETTINGS"] = plugin_settings

    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj:
            app.config.from_object(config_obj)

    install_request_logging(app)
    register_plugin_blueprints(app)

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    manifests = _load_manifests()
    for manifest in manifests:
        blueprint = manifest.get("blueprint")
        plugin_config = plugin_settings.get(blueprint, {}) if blueprint else {}
        if plugin_config.get("summary"):
            manifest["summary"] = plugin_config["summary"]
    app.config["PLUGIN_MANIFESTS"] = manifests

    def _prepare_manifests() -> list[dict]:
        prepared: list[dict] = []
        for manifest in app.config.get("PLUGIN_MANIFESTS", []):
            entry = dict(manifest)
            blueprint = entry.get("blueprint")
            if blueprint and blueprint in app.blueprints:
                entry["href"] = url_for(f"{blueprint}.index")
            prepared.append(entry)
        return prepared

    @app.context_processor
    def inject_navigation():
        site_config = app.config.get("SITE_SETTINGS", {})
        return {
            "nav_plugins": _prepare_manifests(),
            "site_settings": site_config,
            "current_theme": site_config.get("default_theme", "midnight"),
        }

    @app.route("/")
    def home() -> str:
        return render_template("index.html", plugins=_prepare_manifests())

    @app.errorhandler(400)
    def bad_request(error):  # pragma: no cover - simple template rendering
        return render_template("errors/400.html"), 400

    @app.errorhandler(404)
    def not_found(error):
        return render_template("errors/404.html"), 404

    @app.errorhandler(500)
    def server_error(error):  # pragma: no cover
        return render_template("errors/500.html"), 500

    return app


__all__ = ["create_app"]
