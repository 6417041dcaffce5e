from aiogram.fsm.state import State, StatesGroup


class SubmissionFlow(StatesGroup):
    waiting_file = State()


class ReplyFlow(StatesGroup):
    # data: reply_to_user, reply_to_submission
    waiting_answer = State()
