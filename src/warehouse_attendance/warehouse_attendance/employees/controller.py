from __future__ import annotations

from flask import Flask, request

from ..common.responses import api_domain_error, api_error, api_internal_error, api_success
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/empleados", methods=["POST"], endpoint="api_create_employee")
    def api_create_employee():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return api_error("Todos los campos son requeridos", 400, code="INVALID_INPUT")

        try:
            employee = service.register(
                dni=data.get("dni"),
                full_name=data.get("nombre"),
                position=data.get("cargo"),
            )
        except DomainError as e:
            return api_domain_error(e, persistence_message="Error al registrar empleado")
        except Exception as e:
            return api_internal_error(e)

        app.logger.info("Employee registered: dni=%s", employee.dni)
        return api_success(employee.to_api())

    @app.route("/api/empleados", methods=["GET"], endpoint="api_list_employees")
    def api_list_employees():
        try:
            employees = service.list_all()
        except DomainError as e:
            return api_domain_error(e, persistence_message="Error al obtener empleados")
        except Exception as e:
            return api_internal_error(e)
        return api_success([e.to_api() for e in employees])
