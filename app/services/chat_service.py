"""AI chat relay in front of the OpenAI chat completions API."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from openai import OpenAI, OpenAIError
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import UpstreamError, ValidationError
from app.schemas.chat import ChatInput, ChatMessageInput

logger = logging.getLogger(__name__)

INVALID_MESSAGES_MESSAGE = "Invalid messages format"
FALLBACK_REPLY = "Üzgünüm, bir hata oluştu."

CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 300

SYSTEM_PROMPT = """Sen, Flow Coaching & Leadership Institute'da koçluk eğitimi hakkında bilgi veren bir AI eğitim danışmanısın. Aynı zamanda satış temsilcisi gibi yönlendirici ve ikna edici şekilde konuşursun.

GÖREVLER:
1. Kullanıcının sorularını yanıtla
2. Koçluk eğitimi hakkında bilgi ver
3. Konuşma boyunca profesyonel ama sıcak bir ton kullan
4. Kullanıcıyı eğitime kayıt olmaya yönlendir
5. "İstersen seni hemen ön kayda alabilirim" gibi satış CTA'ları kullan
6. Kullanıcı iletişim bilgisi paylaşmak isterse, ekrandaki formu doldurmasını söyle

EĞİTİM BİLGİLERİ:
- Program: Flow Temel Koçluk Okulu - ICF Onaylı Sertifika Programı
- Format: Tamamen Online (Canlı dersler)
- Süre: 6 Modül, toplam 125+ saat
- Akreditasyon: ICF Level 1 & Level 2
- Fiyat bilgisi için detaylı bilgi almak isteyenlere danışman yönlendirmesi yap

MODÜLLER:
1. Koçluğa Giriş ve Temel İlkeler
2. Aktif Dinleme ve Güçlü Sorular
3. Hedef Belirleme ve Aksiyon Planlama
4. Değerler ve İnançlarla Çalışma
5. Koçluk Araçları ve Modelleri
6. Süpervizyon ve Sertifikasyon

ÖNEMLİ:
- Türkçe konuş
- Samimi ama profesyonel ol
- Soruları kısa ve net tut
- Her mesajda bir soru veya CTA olsun
- Cevapları kısa tut (maksimum 2-3 cümle)"""


def parse_chat_input(payload: Mapping[str, Any]) -> ChatInput:
    try:
        return ChatInput.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(INVALID_MESSAGES_MESSAGE) from exc


class ChatRelay:
    """Stateless relay: the caller sends the whole history on every turn."""

    def __init__(
        self,
        client: Any | None,
        *,
        model: str = "gpt-4o-mini",
        temperature: float = CHAT_TEMPERATURE,
        max_tokens: int = CHAT_MAX_TOKENS,
    ) -> None:
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_api_key(cls, api_key: str | None, *, model: str, timeout: float) -> ChatRelay:
        client = OpenAI(api_key=api_key, timeout=timeout) if api_key else None
        return cls(client, model=model)

    def build_messages(self, messages: Sequence[ChatMessageInput]) -> list[dict[str, str]]:
        return [{"role": "system", "content": SYSTEM_PROMPT}] + [
            {"role": message.role, "content": message.content} for message in messages
        ]

    def converse(self, messages: Sequence[ChatMessageInput]) -> str:
        """Return the assistant reply for ``messages``."""

        if self.client is None:
            raise UpstreamError("Chat provider is not configured")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(messages),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as exc:
            logger.error("Chat completion failed: %s", exc)
            raise UpstreamError(str(exc)) from exc

        if not response.choices:
            return FALLBACK_REPLY
        return response.choices[0].message.content or FALLBACK_REPLY
