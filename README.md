# zendesk-client

A small client for the Zendesk Support REST API (`/api/v2`).
Payloads are plain dataclasses, requests go through a `requests.Session`,
and failed calls raise exceptions.

## Installation

```
pip install zendesk-client
```

To run the test suite as well:

```
pip install "zendesk-client[test]"
pytest
```

## Connecting

`zendesk_client.client.Client` combines every endpoint group in one object.
It needs either a subdomain or a full endpoint URL, and, optionally,
credentials: an e-mail address with an API token or password (sent as HTTP
basic auth), or a bearer token (sent as `Authorization: Bearer ...`, and
preferred when both are given).

```python
import requests

from zendesk_client.client import Client

session = requests.Session()
client = Client(session, subdomain="mycompany", email="agent@example.com", secret="token")
```

If no session is passed, the client makes its own.

A subdomain must consist of lower-case letters, digits and hyphens, be at
least three characters long, and start and end with a letter or digit;
otherwise `ValueError` is raised. The base URL becomes
`https://<subdomain>.zendesk.com/api/v2`. Switch later with
`client.use_subdomain("othercompany")`.

To point the client at another server, such as a local mock, pass
`endpoint_url="http://127.0.0.1:3000"`; it is used as given and takes
precedence over `subdomain`. Sending a request with neither set raises
`RuntimeError`.

Every request carries the headers in `client.headers`
(`User-Agent` and `Content-Type: application/json` by default); add to that
dict to send more.

## Working with tickets

```python
from zendesk_client.ticket import Ticket, TicketListOptions
from zendesk_client.ticket_comment import TicketComment

tickets, page = client.get_tickets(TicketListOptions(sort_by="id", sort_order="asc"))

ticket = client.create_ticket(
    Ticket(subject="Printer on fire", comment=TicketComment(body="Please help."))
)

client.create_ticket_comment(ticket.id, TicketComment.private_comment("Looking into it", 12345))
for comment in client.list_ticket_comments(ticket.id):
    print(comment.body)

client.delete_ticket(ticket.id)
```

List calls return a pair: the decoded items and a dict holding every other
top-level key of the response (such as `next_page`, `previous_page` and
`count`).

Custom field values on a ticket are decoded as a string, a list of strings,
a boolean or `None`; any other value raises `ValueError`.

When encoding a payload, fields marked as omit-when-empty (zero, empty
string, empty list, `False`, `None`) are left out of the JSON body.

## Endpoint groups

Each group is a class in its own module; `Client` inherits them all.

- `target.TargetAPI`: `get_targets`, `get_target`, `create_target`, `update_target`, `delete_target`
- `ticket.TicketAPI`: `get_tickets`, `get_ticket`, `get_multiple_tickets`,
  `create_ticket`, `update_ticket`, `delete_ticket`
- `ticket_comment.TicketCommentAPI`: `create_ticket_comment`,
  `list_ticket_comments`, `make_comment_private`
- `ticket_audit.TicketAuditAPI`: `get_all_ticket_audits` (with `CursorOptions`),
  `get_ticket_audits` (with `PageOptions`), `get_ticket_audit`
- `ticket_field.TicketFieldAPI`: `get_ticket_fields`, `get_ticket_field`,
  `create_ticket_field`, `update_ticket_field`, `delete_ticket_field`
- `ticket_form.TicketFormAPI`: `get_ticket_forms`, `get_ticket_form`,
  `create_ticket_form`, `update_ticket_form`, `delete_ticket_form`
- `trigger.TriggerAPI`: `get_triggers`, `get_trigger`, `create_trigger`,
  `update_trigger`, `delete_trigger`
- `user.UserAPI`: `get_users`, `search_users`, `get_many_users`, `get_user`,
  `create_user`, `create_or_update_user`, `update_user`, `get_user_related`
- `user_field.UserFieldAPI`: `get_user_fields`
- `view.ViewAPI`: `get_views`, `get_view`, `get_tickets_from_view`
- `webhook.WebhookAPI`: `create_webhook`, `get_webhook`, `update_webhook`,
  `delete_webhook`, `get_webhook_signing_secret`

`zendesk_client.topics.Topic` describes a help center community topic; no
endpoint returns it yet, but `zendesk_client.payload.decode(Topic, data)`
builds one from JSON.

For endpoints without a dedicated method, use the raw calls. `get`, `post`
and `put` return the response body as bytes; `delete` returns nothing.

```python
body = client.get("/groups.json")
```

Accepted statuses: 200 for GET, 200 or 201 for POST, 200 or 204 for PUT,
204 for DELETE.

## Errors

A response with any other status raises `zendesk_client.base.APIError`.
It carries the HTTP `status` and the raw `body`, and its text reads like
`401: {"error":"Couldn't authenticate you"}`.

`get_triggers` needs an options object; passing `None` raises
`zendesk_client.base.OptionsError`, a `ValueError`.

## Lookup helpers

```python
from zendesk_client.user import UserRole, user_role_text
from zendesk_client.via_types import ViaType, via_type_text

user_role_text(UserRole.AGENT)     # "agent"
via_type_text(ViaType.WEB_FORM)    # "web_form"
```

Unknown values give an empty string.

## Payload helpers

`zendesk_client.payload` holds the mapping used throughout: `json_field`
declares a dataclass field's wire key and omit-when-empty rule, `encode` and
`decode` convert between dataclasses and JSON values, `parse_time` and
`format_time` handle RFC 3339 timestamps, and `query_params` (with
`zendesk_client.base.add_options`) builds sorted query strings from options
objects.

## What it does not do

The package is a library only: it has no command-line tool. It covers the
endpoint groups listed above and nothing else (no groups, organizations or
help center endpoints beyond the raw calls), does not retry failed requests,
and does not follow pagination for you; use the returned page dict to ask
for the next page.