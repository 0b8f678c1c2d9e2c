from __future__ import annotations


class ResultsError(Exception):
    # Base class for failures while aggregating form results.
    pass


class DataIntegrityError(ResultsError):
    # Raised when the row streams contradict each other.
    pass


class UnknownQuestionError(DataIntegrityError):
    # Raised when a passage answers a question missing from the form definition.
    def __init__(self, passage_id: int, question_id: int):
        self.passage_id = passage_id
        self.question_id = question_id
        super().__init__(
            f"passage {passage_id} answers question {question_id}, which is not part of the form"
        )


class FormMismatchError(DataIntegrityError):
    # Raised when definition rows of more than one form end up in a single call.
    def __init__(self, expected_form_id: int, form_id: int):
        self.expected_form_id = expected_form_id
        self.form_id = form_id
        super().__init__(f"definition row of form {form_id} in results of form {expected_form_id}")
