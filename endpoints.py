# Routes of the file-sharing service; update if the backend changes.

BASE_URL = "https://filesharingcli-production.up.railway.app"

ENDPOINTS = {
    "create": {
        "method": "POST",
        "path": "/createsite",
    },
    "access": {
        "method": "GET",
        "path": "/site/{name}",
    },
}

FILES = {
    "upload": {
        "method": "POST",
        "path": "/upload/{name}",
    },
    "download": {
        "method": "GET",
        "path": "/getfile/{file_id}",
    },
}
