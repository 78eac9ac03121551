import json


def read_payload(request) -> dict:
    """
    Request body as a dict: JSON from the storefront or form-encoded
    (Razorpay Checkout posts its callback_url as a form).
    Raises ValueError on malformed JSON.
    """
    if request.content_type == 'application/json':
        if not request.body:
            return {}
        data = json.loads(request.body.decode('utf-8'))
        if not isinstance(data, dict):
            raise ValueError("JSON body must be an object")
        return data
    return request.POST.dict()
