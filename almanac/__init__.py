import logging

from flask import Flask, Response, jsonify, request
from pydantic import ValidationError

from .calendar_math import parse_iso_date
from .config import CalendarConfig
from .exceptions import ExportError, UnsupportedLocaleError
from .locales import get_locale
from .models.export import ExportSelection
from .output.download import ExportTrigger, load_bundle
from .relative import RelativeTextFormatter

logger = logging.getLogger(__name__)


def create_app(config: CalendarConfig | None = None):
    config = config or CalendarConfig.from_env()
    app = Flask(__name__)
    trigger = ExportTrigger()

    @app.route("/data/<int:year>.json", methods=["GET"])
    def day_data(year):
        """Serve the day data document for a year."""
        path = config.data_dir / f"{year}.json"
        if not path.is_file():
            return ("No data for this year", 404)

        return Response(
            path.read_text(encoding="utf-8"),
            content_type="application/json; charset=utf-8",
        )

    @app.route("/export", methods=["POST"])
    def export():
        """Build an ICS download from an export bundle and selection."""
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return ("Expected a JSON object", 400)

        try:
            bundle = load_bundle(
                payload.get("bundle") or {},
                calendar_name=config.default_calendar_name,
                domain=config.default_domain,
            )
            selection = ExportSelection.model_validate(payload.get("selection") or {})
        except ExportError as e:
            return (str(e), 400)
        except ValidationError as e:
            return (f"Invalid selection: {e}", 400)

        result = trigger.prepare(bundle, selection)
        if result is None:
            # Nothing selected or matched
            return ("", 204)

        logger.info(f"Serving {result.filename} with {result.event_count} events")
        response = Response(result.content, content_type=result.media_type)
        response.headers.set(
            "Content-Disposition", "attachment", filename=result.filename
        )
        return response

    @app.route("/relative", methods=["GET"])
    def relative():
        """Relative phrase for a date, e.g. ?date=2025-12-25&locale=nl."""
        target = parse_iso_date(request.args.get("date", ""))
        if not target.ok:
            return (target.error, 400)

        reference = None
        if request.args.get("ref"):
            parsed_ref = parse_iso_date(request.args["ref"])
            if not parsed_ref.ok:
                return (parsed_ref.error, 400)
            reference = parsed_ref.value

        try:
            patterns = get_locale(request.args.get("locale", config.default_locale))
        except UnsupportedLocaleError as e:
            return (str(e), 400)

        label = RelativeTextFormatter(patterns).format(target.value, reference)
        return jsonify(
            {
                "text": label.text,
                "direction": label.direction.value,
                "days": label.days,
            }
        )

    return app
