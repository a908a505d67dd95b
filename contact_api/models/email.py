from pydantic import BaseModel, Field
from typing import Optional, Dict, Any

class OutboundEmail(BaseModel):
    sender: str = Field(..., description="Verified sender identity")
    to: str
    subject: str
    text: Optional[str] = None
    html: Optional[str] = None
    reply_to: Optional[str] = None

    def to_resend_payload(self) -> Dict[str, Any]:
        """Request body for the Resend /emails endpoint"""
        payload: Dict[str, Any] = {
            "from": self.sender,
            "to": [self.to],
            "subject": self.subject,
        }
        if self.text is not None:
            payload["text"] = self.text
        if self.html is not None:
            payload["html"] = self.html
        if self.reply_to:
            payload["reply_to"] = self.reply_to
        return payload
