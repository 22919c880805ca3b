"""
검색용 유사도 계산. 로컬 계산만 (네트워크 호출 없음).

bag-of-words 코사인 유사도:
  소문자 토큰화 -> 불용어 제거 -> 단어 빈도 벡터 -> cos(a, b)
빈도는 음수가 없으므로 결과는 항상 [0, 1].
"""
from __future__ import annotations

import math
import re
from collections import Counter
from typing import Dict, List

TOKEN_RE = re.compile(r"[a-z0-9']+")

STOP_WORDS = frozenset({
    "a", "about", "after", "again", "all", "am", "an", "and", "any", "are", "as", "at",
    "be", "because", "been", "before", "being", "but", "by", "can", "could", "did", "do",
    "does", "doing", "for", "from", "had", "has", "have", "having", "he", "her", "here",
    "him", "his", "how", "i", "i'm", "if", "in", "into", "is", "it", "it's", "its", "me",
    "my", "myself", "of", "on", "or", "our", "she", "so", "than", "that", "the", "their",
    "them", "then", "there", "these", "they", "this", "those", "to", "too", "very", "was",
    "we", "were", "what", "when", "where", "which", "while", "who", "why", "will", "with",
    "would", "you", "your",
})


def tokenize(text: str | None) -> List[str]:
    words = TOKEN_RE.findall((text or "").lower())
    return [w.strip("'") for w in words if w.strip("'") and w not in STOP_WORDS]


def term_vector(text: str | None) -> Dict[str, int]:
    return Counter(tokenize(text))


def cosine_similarity(a: str | None, b: str | None) -> float:
    va, vb = term_vector(a), term_vector(b)
    if not va or not vb:
        return 0.0

    dot = sum(count * vb.get(term, 0) for term, count in va.items())
    norm_a = math.sqrt(sum(c * c for c in va.values()))
    norm_b = math.sqrt(sum(c * c for c in vb.values()))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    # 부동소수 오차로 1.0000000002 같은 값이 나오지 않게
    return min(1.0, dot / (norm_a * norm_b))
