SERVICE_NAME = "linkpreview"
