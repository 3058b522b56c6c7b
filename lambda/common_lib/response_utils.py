import json
from decimal import Decimal

response_headers = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST,OPTIONS",
    "Access-Control-Allow-Headers": "Accept, Content-Type, Authorization"
}

def convert_decimal(obj):
    """Convert Decimal objects to float for JSON serialization"""
    if isinstance(obj, list):
        return [convert_decimal(i) for i in obj]
    elif isinstance(obj, dict):
        return {k: convert_decimal(v) for k, v in obj.items()}
    elif isinstance(obj, Decimal):
        return float(obj)
    return obj

def safe_json_dumps(data):
    """Serialize response data, converting DynamoDB Decimals first"""
    return json.dumps(convert_decimal(data), default=str)

def build_response(status_code, body):
    return {
        "statusCode": status_code,
        "headers": dict(response_headers),
        "body": body,
        "isBase64Encoded": False
    }

def preflight_response():
    """Empty 204 response for CORS preflight requests"""
    return build_response(204, "")

def error_response(message, status_code=400):
    print(f"Error response: {message} (status: {status_code})")
    
    response_body = {
        "success": False,
        "error": message
    }
    
    return build_response(status_code, safe_json_dumps(response_body))

def success_response(data, success=True, status_code=200):
    print(f"Success response with data: {data}")
    
    response_body = {
        "success": success,
        **data
    }
    
    return build_response(status_code, safe_json_dumps(response_body))
