from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import RecordNotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    def _raw_text_body():
        # Only text/plain bodies count, e.g. "12345,2025-03-22 10:00".
        if request.mimetype != "text/plain":
            return None
        return request.get_data(as_text=True)

    @app.route("/attendance", methods=["POST"], endpoint="attendance_create")
    def create():
        try:
            result = service.record(_raw_text_body(), class_id=request.args.get("classId"))
        except ValidationError as e:
            return _error(str(e), 400)
        except StorageError:
            logger.exception("Error inserting data")
            return _error("Failed to save attendance", 500)

        return jsonify({
            "message": "Attendance recorded",
            "studentId": result.student_id,
            "timestamp": result.timestamp,
        }), 201

    @app.route("/attendance", methods=["GET"], endpoint="attendance_list")
    def list_all():
        try:
            records = service.list_all()
        except StorageError:
            logger.exception("Error fetching data")
            return _error("Failed to fetch attendance", 500)
        return jsonify([r.to_json() for r in records])

    @app.route("/attendance/search", methods=["GET"], endpoint="attendance_search")
    def search():
        try:
            records = service.search(
                student_id=request.args.get("studentId"),
                date=request.args.get("date"),
            )
        except StorageError:
            logger.exception("Error searching data")
            return _error("Failed to search attendance", 500)
        return jsonify([r.to_json() for r in records])

    @app.route("/attendance/<record_id>", methods=["PUT"], endpoint="attendance_update")
    def update(record_id: str):
        try:
            service.update(record_id, request.get_json(silent=True))
        except ValidationError as e:
            return _error(str(e), 400)
        except RecordNotFoundError:
            return _error("Attendance record not found", 404)
        except StorageError:
            logger.exception("Error updating data")
            return _error("Failed to update attendance", 500)
        return jsonify({"message": "Attendance updated", "id": record_id})

    @app.route("/attendance/<record_id>", methods=["DELETE"], endpoint="attendance_delete")
    def delete(record_id: str):
        try:
            service.delete(record_id)
        except RecordNotFoundError:
            return _error("Attendance record not found", 404)
        except StorageError:
            logger.exception("Error deleting data")
            return _error("Failed to delete attendance", 500)
        return jsonify({"message": "Attendance deleted", "id": record_id})
