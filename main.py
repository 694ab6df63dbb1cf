import os
import re

from astrbot.api import logger
from astrbot.api.event import AstrMessageEvent, filter
from astrbot.api.star import Context, Star, register
from astrbot.core.message.message_event_result import MessageChain
from astrbot.core.star.filter.event_message_type import EventMessageType

from .jordle import (  # type: ignore
    GuessEngine,
    InvalidGuess,
    InvalidReason,
    Statistics,
    WordBank,
    load_word_bank,
    render_board,
)

IGNORE_MSG = ["wordle start", "wordle stop", "wordle stats", "wordle help"]

INVALID_GUESS_MSG = {
    InvalidReason.WRONG_LENGTH: "输入单词长度应该为5",
    InvalidReason.NON_ALPHABETIC: "输入应该是英文",
    InvalidReason.NOT_IN_DICTIONARY: "该单词不在有效词表中，请重新输入",
    InvalidReason.ROUND_ALREADY_OVER: "本局已结束，请输入 wordle start 开始新游戏",
}

HELP_TEXT = (
    "1. 在6次内猜出一个5个字母的英文单词\n"
    "2. 每次猜测后格子会变色:\n"
    "   - 绿色: 字母正确且位置正确\n"
    "   - 黄色: 字母在单词中但位置错误\n"
    "   - 灰色: 字母不在单词中\n"
    "3. 直接发送单词即可猜测，尽量用更少的次数猜中!"
)


@register(
    "astrbot_plugin_jordle",
    "Raven95676",
    "Astrbot wordle游戏，五字母经典模式，附带战绩统计",
    "1.1.0",
)
class PluginJordle(Star):
    def __init__(self, context: Context):
        super().__init__(context)
        self.word_bank: WordBank = load_word_bank()
        self.game_sessions: dict[str, GuessEngine] = {}
        self.session_stats: dict[str, Statistics] = {}

    def get_stats(self, session_id: str) -> Statistics:
        if session_id not in self.session_stats:
            self.session_stats[session_id] = Statistics()
        return self.session_stats[session_id]

    @filter.command_group("wordle")
    def wordle(self):
        pass

    @wordle.command("start")
    async def start_wordle(self, event: AstrMessageEvent):
        """开始Wordle游戏"""
        session_id = event.unified_msg_origin

        game = self.game_sessions.get(session_id)
        if game is not None:
            game.reset()
        else:
            game = GuessEngine(self.word_bank)
            game.add_outcome_listener(self.get_stats(session_id).record)
            self.game_sessions[session_id] = game

        yield event.plain_result("游戏已开始，请输入猜测")
        logger.debug(f"答案是：{game.secret}")

    @wordle.command("stop")
    async def stop_wordle(self, event: AstrMessageEvent):
        """中止Wordle游戏"""
        session_id = event.unified_msg_origin
        if session_id in self.game_sessions:
            del self.game_sessions[session_id]
            yield event.plain_result("已结束当前游戏")
        else:
            yield event.plain_result("当前未开始游戏")

    @wordle.command("stats")
    async def show_stats(self, event: AstrMessageEvent):
        """查看战绩统计"""
        stats = self.get_stats(event.unified_msg_origin)
        yield event.plain_result(
            "游戏统计\n"
            f"总局数: {stats.total_games}\n"
            f"胜利局数: {stats.games_won}\n"
            f"胜率: {stats.win_percentage:.1f}%\n"
            f"当前连胜: {stats.current_streak}\n"
            f"最高连胜: {stats.max_streak}"
        )

    @wordle.command("help")
    async def show_help(self, event: AstrMessageEvent):
        """查看游戏规则"""
        yield event.plain_result(HELP_TEXT)

    @filter.event_message_type(EventMessageType.ALL)  # noqa: F405
    async def on_all_message(self, event: AstrMessageEvent):
        msg = event.get_message_str().strip()
        session_id = event.unified_msg_origin
        if session_id in self.game_sessions and event.is_at_or_wake_command:
            game = self.game_sessions[session_id]

            for ignore in IGNORE_MSG:
                if ignore in msg:
                    return

            try:
                game.submit_guess(msg)
            except InvalidGuess as e:
                yield event.plain_result(INVALID_GUESS_MSG[e.reason])
                return

            image_result = render_board(game.history, game.max_attempts, game.length)

            # 保证兼容性,处理Windows下非法路径问题
            file_id = session_id
            if os.name == "nt":
                file_id = re.sub(r'[\\/:*?"<>|!]', "_", file_id)
            img_path = os.path.join(
                os.path.dirname(os.path.abspath(__file__)),
                f"{file_id}_{game.attempts_used}_wordle.png",
            )
            with open(img_path, "wb") as f:
                f.write(image_result)

            if game.is_won:
                sender_info = (
                    event.get_sender_name()
                    if event.get_sender_name()
                    else event.get_sender_id()
                )
                game_status = f"恭喜{sender_info}猜对了！正确答案是: {game.secret.upper()}"
                del self.game_sessions[session_id]
            elif game.is_game_over:
                game_status = f"游戏结束。正确答案是: {game.secret.upper()}"
                del self.game_sessions[session_id]
            else:
                game_status = f"已猜测 {game.attempts_used}/{game.max_attempts} 次"

            try:
                await event.send(MessageChain().file_image(img_path).message(game_status))
            finally:
                os.remove(img_path)

    def terminate(self):
        """当插件被卸载/停用时会调用"""
        del self.game_sessions
