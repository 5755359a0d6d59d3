"""Outreach helpers: mailto links and clipboard payloads for an opportunity."""

from typing import Literal
from urllib.parse import quote

from opportunity_finder.models.opportunity import OpportunityRecord

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"

ClipboardKind = Literal["prompt", "email"]


def encode_uri_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_mailto_link(opp: OpportunityRecord) -> str:
    """mailto: link to the manager with the proposal subject and body prefilled."""
    subject = encode_uri_component(opp.proposal_email.subject)
    body = encode_uri_component(opp.proposal_email.body)
    return f"mailto:{opp.manager_email}?subject={subject}&body={body}"


def clipboard_payload(opp: OpportunityRecord, kind: ClipboardKind) -> str:
    """Text copied by the 'copy' buttons: the build prompt or the proposal body."""
    if kind == "prompt":
        return opp.app_creation_prompt
    if kind == "email":
        return opp.proposal_email.body
    raise ValueError(f"Unknown clipboard payload: {kind}")
