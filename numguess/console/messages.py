"""
Messages - Every string the player sees.

Each message is a fixed pair of Chinese and English text and is shown
with both languages on one line. Placeholders use str.format syntax;
a placeholder value that is itself a Message is rendered in the
matching language, with the remaining plain values as its parameters.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from .reader import ReadError

SEPARATOR = " / "


@dataclass(frozen=True)
class Message:
    """A bilingual fixed string."""
    zh: str
    en: str

    def text(self, language: str, **params: Any) -> str:
        """Render in a single language ("zh" or "en")."""
        template = self.zh if language == "zh" else self.en
        plain = {k: v for k, v in params.items() if not isinstance(v, Message)}
        values = {
            key: value.text(language, **plain) if isinstance(value, Message) else value
            for key, value in params.items()
        }
        return template.format(**values)

    def render(self, **params: Any) -> str:
        """Render both languages on one line."""
        return self.text("zh", **params) + SEPARATOR + self.text("en", **params)


class Messages:
    """Catalogue of all game output."""

    # Driver
    TITLE = Message("🎯 猜数字游戏", "Number Guessing Game")
    NEW_GAME = Message("开始新游戏！", "Starting a new game!")
    FAREWELL = Message("感谢游戏！再见！👋", "Thanks for playing! Goodbye!")

    # Game loop
    WELCOME = Message("欢迎来到猜数字游戏！", "Welcome to the number guessing game!")
    INTRO = Message(
        "我已经想好了一个 {minimum}-{maximum} 之间的数字，请开始猜测：",
        "I'm thinking of a number between {minimum} and {maximum}. Start guessing:",
    )
    GUESS_PROMPT = Message("请输入你的猜测：", "Enter your guess: ")
    INVALID_INPUT = Message(
        "输入错误：{reason}，请重新输入。",
        "Invalid input: {reason}, please try again.",
    )
    TOO_HIGH = Message("太大了！请再试一次。", "Too high! Try again.")
    TOO_LOW = Message("太小了！请再试一次。", "Too low! Try again.")
    CORRECT = Message(
        "恭喜你！猜对了！你总共猜了 {attempts} 次。",
        "Congratulations! You got it in {attempts} attempts.",
    )

    # Replay prompt
    REPLAY_PROMPT = Message("是否继续游戏？(y/n)：", "Play again? (y/n): ")
    REPLAY_HINT = Message("请输入 y(是) 或 n(否)。", "Please answer y (yes) or n (no).")
    REPLAY_READ_FAILURE = Message(
        "读取输入失败，默认退出游戏。",
        "Failed to read input, exiting the game.",
    )


READ_ERROR_REASONS: dict[ReadError, Message] = {
    ReadError.READ_FAILURE: Message("读取输入失败", "failed to read input"),
    ReadError.EMPTY_INPUT: Message("输入不能为空", "input must not be empty"),
    ReadError.NOT_A_NUMBER: Message("请输入一个有效的数字", "please enter a valid number"),
    ReadError.OUT_OF_RANGE: Message(
        "数字必须在 {minimum}-{maximum} 之间",
        "the number must be between {minimum} and {maximum}",
    ),
}
