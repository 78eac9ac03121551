from django.db import transaction
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from core.http import read_payload
from core.mail import send_quietly
from .forms import ContactForm
from .services import send_contact_email


@csrf_exempt
@require_POST
def contact(request):
    try:
        form = ContactForm(read_payload(request))
    except ValueError:
        return JsonResponse({"status": False, "message": "Bad JSON"}, status=400)
    if not form.is_valid():
        return JsonResponse({"status": False, "errors": form.errors}, status=400)

    obj = form.save(commit=False)
    if request.user.is_authenticated:
        obj.user = request.user
    obj.save()

    # notification must not break the submission
    transaction.on_commit(lambda: send_quietly(send_contact_email, obj))
    return JsonResponse({"status": True, "message": "Thank you! Your message has been sent."})
