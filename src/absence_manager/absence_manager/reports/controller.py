from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_endpoint, json_error, login_required, query_int
from ..common.serialization import to_json
from ..core.constants import DEFAULT_RECENT_ACTIVITY_LIMIT, DEFAULT_TOP_ABSENTEES_LIMIT
from ..container import Container


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route("/api/statistics", methods=["GET"], endpoint="statistics")
    @login_required
    @json_endpoint("fetching statistics")
    def statistics():
        return jsonify(to_json(reports.statistics()))

    @app.route("/api/statistics/top-absentees", methods=["GET"], endpoint="statistics_top_absentees")
    @login_required
    @json_endpoint("fetching top absentees")
    def top_absentees():
        limit = query_int("limit")
        return jsonify(to_json(reports.top_absentees(DEFAULT_TOP_ABSENTEES_LIMIT if limit is None else limit)))

    @app.route("/api/statistics/recent-activities", methods=["GET"], endpoint="statistics_recent_activities")
    @login_required
    @json_endpoint("fetching recent activities")
    def recent_activities():
        limit = query_int("limit")
        return jsonify(to_json(reports.recent_activity(DEFAULT_RECENT_ACTIVITY_LIMIT if limit is None else limit)))

    @app.route("/api/statistics/threshold-breaches", methods=["GET"], endpoint="statistics_threshold_breaches")
    @login_required
    @json_endpoint("fetching threshold breaches")
    def threshold_breaches():
        course_id = query_int("courseId")
        if course_id is None:
            return jsonify(to_json(reports.threshold_overview()))

        report = reports.threshold_breaches(course_id)
        if not report:
            return json_error("Course not found", 404)
        return jsonify(to_json(report))
