# smart_reply_agent/responses.py

from .models import Category

CATEGORY_RESPONSES = {
    Category.INQUIRY: (
        "I've reviewed your inquiry and would like to provide you with the information you requested. "
        "Our team specializes in this area, and we're committed to providing comprehensive solutions "
        "tailored to your specific needs."
    ),
    Category.MEETING_REQUEST: (
        "I am available this Thursday at 2:00 PM or Friday at 10:00 AM (Eastern Time). "
        "Alternatively, I could arrange a meeting early next week if that would be more convenient for you."
    ),
    Category.FOLLOW_UP: (
        "We have made significant progress on the project since our last communication. "
        "The team has completed the initial phase and we are now moving forward with the next steps "
        "as outlined in our project plan."
    ),
    Category.THANK_YOU: (
        "It was my pleasure to assist you. Your satisfaction is important to us, "
        "and I'm glad we were able to meet your expectations."
    ),
    Category.COMPLAINT: (
        "I have escalated this issue to our senior management team. We will be conducting a thorough "
        "investigation to identify the root cause and implement corrective measures. As an immediate step, "
        "I have arranged for a replacement to be sent to you, which you should receive within 2-3 business days."
    ),
    Category.SUPPORT_REQUEST: (
        "Based on your description, I recommend trying the following steps:\n\n"
        "1. Clear your browser cache and cookies\n"
        "2. Restart the application\n"
        "3. Ensure you are using the latest version of our software\n\n"
        "These steps resolve similar issues in most cases."
    ),
    Category.INTRODUCTION: (
        "It's great to learn about your background and interests. Our organization is always looking to "
        "connect with professionals in your field, and I believe there could be some interesting "
        "opportunities for collaboration."
    ),
    Category.FEEDBACK: (
        "We greatly appreciate your thoughtful feedback. Your suggestions align with some improvements "
        "we've been considering, and your perspective provides valuable validation. I've shared your "
        "comments with our product team, who will take them into account in our next development cycle."
    ),
    Category.UNKNOWN: (
        "I've received your message and will review it carefully. If I need any additional information "
        "to properly address your email, I'll be sure to reach out."
    ),
}

FALLBACK_RESPONSE = (
    "I've reviewed your message and appreciate you taking the time to reach out. "
    "Our team is dedicated to providing excellent service, and we value your communication."
)


def generate_response(text: str, category) -> str:
    """
    Canned paragraph for a category. `text` is not used yet; the paragraph
    depends on the category alone.
    """
    try:
        category = Category(category)
    except ValueError:
        return FALLBACK_RESPONSE
    return CATEGORY_RESPONSES.get(category, FALLBACK_RESPONSE)
