"""CalDAV helpers: calendar-query body and VTODO summary extraction."""

import re
from typing import Protocol

REPORT_HEADERS = {
    "Depth": "1",
    "Content-Type": "application/xml; charset=utf-8",
}

# calendar-query for every VTODO whose STATUS does not contain COMPLETED
INCOMPLETE_TODOS_QUERY = """<?xml version="1.0" encoding="utf-8" ?>
<c:calendar-query xmlns:d="DAV:" xmlns:c="urn:ietf:params:xml:ns:caldav">
  <d:prop>
    <d:getetag />
    <c:calendar-data />
  </d:prop>
  <c:filter>
    <c:comp-filter name="VCALENDAR">
      <c:comp-filter name="VTODO">
        <c:prop-filter name="STATUS">
          <c:text-match collation="i;ascii-casemap" negate-condition="yes">COMPLETED</c:text-match>
        </c:prop-filter>
      </c:comp-filter>
    </c:comp-filter>
  </c:filter>
</c:calendar-query>
"""

_SUMMARY_RE = re.compile(r"^SUMMARY:(.*(?:\n[ \t].*)*)", re.MULTILINE)
_FOLD_RE = re.compile(r"\r?\n[ \t]")
_COMPLETED_RE = re.compile(r"STATUS:COMPLETED", re.IGNORECASE)


class TodoParser(Protocol):
    """Turns a raw multi-status REPORT body into todo summaries."""

    def parse(self, body: str) -> list[str]: ...


class RegexTodoParser:
    """Line-scanning heuristic over the raw multi-status body.

    Not an iCalendar parser: SUMMARY lines are collected from the whole
    document and, if STATUS:COMPLETED appears anywhere in it, all of them
    are dropped. The completed check is not scoped to a single VTODO.

    The body is not XML-decoded. Servers that escape the iCalendar CR as
    ``&#13;`` (Nextcloud/sabre-dav does) leave that entity at the end of
    each summary.
    """

    def parse(self, body: str) -> list[str]:
        if not isinstance(body, str):
            raise ValueError("CalDAV response body is not text")

        summaries = [_FOLD_RE.sub("", m.group(1)).strip() for m in _SUMMARY_RE.finditer(body)]

        if _COMPLETED_RE.search(body):
            return []
        return summaries
