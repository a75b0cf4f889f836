from __future__ import annotations

__all__ = (
    "MOOD_RESPONSES",
    "KEYWORD_RESPONSES",
    "DEFAULT_MESSAGE_RESPONSE",
)

VERY_HAPPY_RESPONSES = (
    "That's wonderful! What's bringing you so much joy today?",
    "I love seeing you this happy! Keep riding that positive wave! 🌟",
    "Your happiness is contagious! Tell me more about what's going right!",
)

HAPPY_RESPONSES = (
    "Great to hear you're feeling good! What's contributing to your positive mood?",
    "Happy days are the best! Is there something special that happened?",
    "I'm glad you're in a good place today. What's been working well for you?",
)

NEUTRAL_RESPONSES = (
    "Neutral can be perfectly fine too. How are things going overall?",
    "Sometimes steady is good. Is there anything you'd like to talk about?",
    "A calm, balanced mood is valuable. What's on your mind today?",
)

SAD_RESPONSES = (
    "I'm sorry you're feeling down today. Would you like to talk about what's bothering you?",
    "Sadness is a natural emotion. I'm here to listen if you need support.",
    "It's okay to feel sad sometimes. What might help you feel a little better today?",
)

ANXIOUS_RESPONSES = (
    "Anxiety can be tough. What's making you feel worried right now?",
    "I understand anxiety can be overwhelming. Let's talk through what's on your mind.",
    "Take a deep breath. What's causing you to feel anxious today?",
)

TIRED_RESPONSES = (
    "Feeling tired is your body's way of asking for rest. Have you been getting enough sleep?",
    "Fatigue can affect everything. What's been draining your energy lately?",
    "Rest is important. Is this physical tiredness or emotional exhaustion?",
)

MOOD_RESPONSES: dict[str, tuple[str, ...]] = {
    "very-happy": VERY_HAPPY_RESPONSES,
    "happy": HAPPY_RESPONSES,
    "neutral": NEUTRAL_RESPONSES,
    "sad": SAD_RESPONSES,
    "anxious": ANXIOUS_RESPONSES,
    "tired": TIRED_RESPONSES,
}

# Checked in order, first group with a matching keyword wins.
KEYWORD_RESPONSES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("better", "good"), "That's great to hear! What's helping you feel better?"),
    (
        ("stressed", "overwhelmed"),
        "Stress can be really challenging. Have you tried any relaxation techniques like deep breathing or taking a short walk?",
    ),
    (("sleep", "tired"), "Sleep is so important for mood. Try to maintain a consistent sleep schedule if possible."),
    (("work", "job"), "Work stress is common. Remember to take breaks and set boundaries when you can."),
    (("thank",), "You're very welcome! I'm always here when you need support. 💙"),
)

DEFAULT_MESSAGE_RESPONSE = "I hear you. Can you tell me more about that?"
