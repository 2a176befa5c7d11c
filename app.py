"""Run the attendance tracker with Flask's built-in server.

    APP_ENV=production PORT=10000 python app.py
"""

import logging

from src.attendance_tracker.attendance_tracker.main import create_app

app = create_app()

if __name__ == "__main__":
    port = app.config["PORT"]
    logging.getLogger("attendance_tracker").info("Server running on port %s", port)
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])
