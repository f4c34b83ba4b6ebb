SERVICE_NAME = "toggl_reports"
