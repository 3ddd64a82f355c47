"""Channel identifiers for how a ticket or event arrived."""

from enum import IntEnum


class ViaType(IntEnum):
    """Numeric via ids used by business rules."""

    WEB_FORM = 0
    MAIL = 4
    CHAT = 29
    TWITTER = 30
    TWITTER_DM = 26
    TWITTER_FAVORITE = 23
    VOICEMAIL = 33
    PHONE_CALL_INBOUND = 34
    PHONE_CALL_OUTBOUND = 35
    API_VOICEMAIL = 44
    API_PHONE_CALL_INBOUND = 45
    API_PHONE_CALL_OUTBOUND = 46
    SMS = 57
    GET_SATISFACTION = 16
    WEB_WIDGET = 48
    MOBILE_SDK = 49
    MOBILE = 56
    HELP_CENTER = 50
    WEB_SERVICE = 5
    RULE = 8
    CLOSED_TICKET = 27
    TICKET_SHARING = 31
    FACEBOOK_POST = 38
    FACEBOOK_MESSAGE = 41
    SATISFACTION_PREDICTION = 54
    ANY_CHANNEL = 55


_VIA_TYPE_TEXT = {
    ViaType.WEB_FORM: "web_form",
    ViaType.MAIL: "mail",
    ViaType.CHAT: "chat",
    ViaType.TWITTER: "twitter",
    ViaType.TWITTER_DM: "twitter_dm",
    ViaType.TWITTER_FAVORITE: "twitter_favorite",
    ViaType.VOICEMAIL: "voicemail",
    ViaType.PHONE_CALL_INBOUND: "phone_call_inbound",
    ViaType.PHONE_CALL_OUTBOUND: "phone_call_outbound",
    ViaType.API_VOICEMAIL: "api_voicemail",
    ViaType.API_PHONE_CALL_INBOUND: "api_phone_call_inbound",
    ViaType.API_PHONE_CALL_OUTBOUND: "api_phone_call_outbound",
    ViaType.SMS: "sms",
    ViaType.GET_SATISFACTION: "get_satisfaction",
    ViaType.WEB_WIDGET: "web_widget",
    ViaType.MOBILE_SDK: "mobile_sdk",
    ViaType.MOBILE: "mobile",
    ViaType.HELP_CENTER: "helpcenter",
    ViaType.WEB_SERVICE: "web_service",
    ViaType.RULE: "rule",
    ViaType.CLOSED_TICKET: "closed_ticket",
    ViaType.TICKET_SHARING: "ticket_sharing",
    ViaType.FACEBOOK_POST: "facebook_post",
    ViaType.FACEBOOK_MESSAGE: "facebook_message",
    ViaType.SATISFACTION_PREDICTION: "satisfaction_prediction",
    ViaType.ANY_CHANNEL: "any_channel",
}


def via_type_text(via_id):
    """Return the via type name for a via id, or "" if it is unknown."""
    return _VIA_TYPE_TEXT.get(via_id, "")