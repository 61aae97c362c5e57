from __future__ import annotations

import io

import qrcode
from flask import Flask, render_template, request, send_file, url_for

from ..common.datetime_utils import now_local
from ..common.responses import api_domain_error, api_error, api_internal_error, api_success
from ..core.constants import MONTH_NAMES
from ..core.enums import AttendanceKind
from ..core.exceptions import DomainError
from ..container import Container
from .export import XLSX_MIMETYPE, build_attendance_workbook
from .service import parse_month_year


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _attendance_page_url() -> str:
        base_url = app.config.get("PUBLIC_BASE_URL")
        if base_url:
            return base_url.rstrip("/") + url_for("attendance_page")
        return url_for("attendance_page", _external=True)

    # ===== PAGES =====

    @app.route("/", endpoint="home")
    def home():
        return render_template("index.html")

    @app.route("/asistencia", endpoint="attendance_page")
    def attendance_page():
        return render_template("asistencia.html", kinds=list(AttendanceKind))

    @app.route("/admin", endpoint="admin_panel")
    def admin_panel():
        today = now_local(service.timezone).date()
        return render_template(
            "admin.html",
            months=MONTH_NAMES,
            years=range(today.year - 2, today.year + 2),
            current_month=today.month,
            current_year=today.year,
            kind_labels={kind.value: kind.label for kind in AttendanceKind},
        )

    @app.route("/admin/qr", endpoint="admin_qr")
    def admin_qr():
        """Printable page with the warehouse QR code."""
        return render_template("admin_qr.html", attendance_url=_attendance_page_url())

    # ===== API =====

    @app.route("/api/asistencia", methods=["POST"], endpoint="api_register_attendance")
    def api_register_attendance():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return api_error("Faltan campos requeridos", 400, code="INVALID_INPUT")

        try:
            record = service.register(
                dni=data.get("dni"),
                kind=data.get("tipo"),
                latitude=data.get("latitud"),
                longitude=data.get("longitud"),
            )
        except DomainError as e:
            return api_domain_error(e, persistence_message="Error al registrar asistencia")
        except Exception as e:
            return api_internal_error(e)

        app.logger.info(
            "Attendance registered: dni=%s kind=%s at %s %s",
            record.dni, record.kind.value, record.work_date, record.work_time,
        )
        return api_success(record.to_api())

    @app.route("/api/asistencia", methods=["GET"], endpoint="api_list_attendance")
    def api_list_attendance():
        try:
            records = service.list_month(month=request.args.get("mes"), year=request.args.get("anio"))
        except DomainError as e:
            return api_domain_error(e, persistence_message="Error al obtener asistencias")
        except Exception as e:
            return api_internal_error(e)
        return api_success([r.to_api() for r in records])

    @app.route("/api/asistencia/excel", methods=["GET"], endpoint="api_export_attendance")
    def api_export_attendance():
        try:
            month, year = parse_month_year(request.args.get("mes"), request.args.get("anio"))
            records = service.list_month(month=month, year=year)
            export = build_attendance_workbook(records, month=month, year=year)
        except DomainError as e:
            return api_domain_error(e, persistence_message="Error al generar Excel")
        except Exception as e:
            return api_internal_error(e)

        return send_file(
            io.BytesIO(export.content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=export.filename,
        )

    @app.route("/api/qr.png", endpoint="api_qr_image")
    def api_qr_image():
        """Generate the warehouse QR code pointing at the attendance page."""
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=2,
        )
        qr.add_data(_attendance_page_url())
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")

        buf = io.BytesIO()
        img.save(buf, format="PNG")
        buf.seek(0)
        return send_file(buf, mimetype="image/png")
