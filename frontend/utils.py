import streamlit as st
import requests
import os

# --- Configuration ---
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5001/api/v1")
SUPPORTED_LANGUAGES = ["csharp", "java", "typescript", "python"]
SUPPORTED_SOURCE_DIALECTS = ["sqlserver", "postgresql", "mysql", "oracle", "snowflake", "bigquery"]

# st.code syntax-highlighting names per target language
CODE_HIGHLIGHT = {
    "csharp": "csharp",
    "java": "java",
    "typescript": "typescript",
    "python": "python",
}

FILE_EXTENSIONS = {
    "csharp": "cs",
    "java": "java",
    "typescript": "ts",
    "python": "py",
}


# --- API Call Functions ---

def api_post_request(endpoint, payload):
    """Helper function to make POST requests to the API.

    Conversion failures come back as 4xx with a JSON body that carries the
    error message, so the body is returned for those too.
    """
    try:
        response = requests.post(f"{API_BASE_URL}/{endpoint}", json=payload)
        response.raise_for_status()  # Raise an exception for HTTP errors (4xx or 5xx)
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        try:
            return response.json() # Try to return JSON error details if possible
        except ValueError:
            st.error(f"HTTP error occurred: {http_err} - Response: {response.text}")
            return {"error": response.text, "status_code": response.status_code}
    except requests.exceptions.RequestException as req_err:
        st.error(f"Request error occurred: {req_err}")
        return {"error": str(req_err)}
    except ValueError as json_err: # Handle cases where response is not JSON
        st.error(f"JSON decode error: {json_err} - Response: {response.text}")
        return {"error": "Failed to decode JSON response", "raw_response": response.text}

def api_get_request(endpoint, params=None):
    """Helper function to make GET requests to the API."""
    try:
        response = requests.get(f"{API_BASE_URL}/{endpoint}", params=params)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        st.error(f"HTTP error occurred: {http_err} - Response: {response.text}")
        try:
            return response.json()
        except ValueError:
            return {"error": response.text, "status_code": response.status_code}
    except requests.exceptions.RequestException as req_err:
        st.error(f"Request error occurred: {req_err}")
        return {"error": str(req_err)}
    except ValueError as json_err:
        st.error(f"JSON decode error: {json_err} - Response: {response.text}")
        return {"error": "Failed to decode JSON response", "raw_response": response.text}

def poco_convert_api(sql_script, language, dialect=None):
    """Calls the /poco/convert endpoint."""
    payload = {"sqlScript": sql_script, "language": language}
    if dialect:
        payload["dialect"] = dialect
    return api_post_request("poco/convert", payload)

def list_languages_api():
    """Calls GET /poco/languages; falls back to the built-in list when the API is down."""
    result = api_get_request("poco/languages")
    return result.get("languages") or SUPPORTED_LANGUAGES
