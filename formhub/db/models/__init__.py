from .user import User
from .form import Form
from .question import Question, QuestionType, AnswerOption
from .passage import FormPassage, PassageAnswer
