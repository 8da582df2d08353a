from __future__ import annotations

import math
import time

from careercraft.schemas.learning import AssessmentQuestion, AssessmentResult, AssessmentSubmission, Badge

PASSING_SCORE = 70


def _q(question: str, options: list[str], correct: str) -> AssessmentQuestion:
    return AssessmentQuestion(question=question, options=options, correct_answer=correct)


DSA_QUESTIONS = (
    _q(
        "What is the time complexity of searching an element in a Binary Search Tree in the worst case?",
        ["O(1)", "O(log n)", "O(n)", "O(n²)"],
        "O(n)",
    ),
    _q(
        "Which data structure uses LIFO (Last In First Out) principle?",
        ["Queue", "Stack", "Linked List", "Tree"],
        "Stack",
    ),
    _q(
        "What is the primary advantage of a hash table?",
        ["O(1) search time on average", "Memory efficiency", "Ordered data storage", "Simplicity of implementation"],
        "O(1) search time on average",
    ),
    _q(
        "Which of the following is NOT a linear data structure?",
        ["Array", "Linked List", "Queue", "Tree"],
        "Tree",
    ),
    _q(
        "What is the space complexity of a recursive algorithm with maximum recursion depth n?",
        ["O(1)", "O(log n)", "O(n)", "O(n²)"],
        "O(n)",
    ),
)

JS_QUESTIONS = (
    _q(
        "What will be the output of: console.log(typeof null)?",
        ["null", "object", "undefined", "number"],
        "object",
    ),
    _q(
        "What is the correct way to check if a variable is an array in JavaScript?",
        [
            'typeof variable === "array"',
            "variable instanceof Array",
            "variable.constructor === Array",
            "Array.isArray(variable)",
        ],
        "Array.isArray(variable)",
    ),
    _q(
        'What does the "use strict" directive do in JavaScript?',
        [
            "Forces all variables to be strictly typed",
            "Enables strict mode which catches common coding mistakes",
            "Makes performance faster by strict optimizations",
            "Restricts the use of arrow functions",
        ],
        "Enables strict mode which catches common coding mistakes",
    ),
    _q(
        "How do you properly create a Promise in JavaScript?",
        [
            "var promise = Promise(resolve, reject) => {}",
            "var promise = new Promise(function(resolve, reject) {})",
            "var promise = Promise.create((resolve, reject) => {})",
            "var promise = await Promise((resolve, reject) => {})",
        ],
        "var promise = new Promise(function(resolve, reject) {})",
    ),
    _q(
        "What is event bubbling in JavaScript?",
        [
            "A technique to handle multiple events simultaneously",
            "When an event travels up from the target element to the root element",
            "A way to optimize event listeners in modern browsers",
            "The process of generating new events automatically",
        ],
        "When an event travels up from the target element to the root element",
    ),
)

REACT_QUESTIONS = (
    _q(
        "What hook would you use to run side effects in a functional component?",
        ["useState", "useEffect", "useContext", "useReducer"],
        "useEffect",
    ),
    _q(
        "What is the correct way to conditionally render a component in React?",
        [
            "if(condition) { <Component /> }",
            "<Component if={condition} />",
            "{condition && <Component />}",
            "<if condition={true}><Component /></if>",
        ],
        "{condition && <Component />}",
    ),
    _q(
        'How do you properly pass a prop called "name" to a child component?',
        [
            "<Child name={name} />",
            "<Child prop:name={name} />",
            "<Child this.props.name={name} />",
            "<Child setName={name} />",
        ],
        "<Child name={name} />",
    ),
    _q(
        "Which method is NOT part of React component lifecycle in class components?",
        ["componentDidMount", "componentDidUpdate", "componentWillReceiveState", "componentWillUnmount"],
        "componentWillReceiveState",
    ),
    _q(
        "What is the purpose of keys in React lists?",
        [
            "To make the list items sortable",
            "To provide a way to access list items directly",
            "To help React identify which items have changed, added, or removed",
            "To enable animations between list updates",
        ],
        "To help React identify which items have changed, added, or removed",
    ),
)


def select_question_bank(topic: str) -> tuple[AssessmentQuestion, ...]:
    lowered = topic.lower()
    if "data structure" in lowered or "algorithm" in lowered:
        return DSA_QUESTIONS
    if "javascript" in lowered or "js" in lowered:
        return JS_QUESTIONS
    if "react" in lowered:
        return REACT_QUESTIONS
    return DSA_QUESTIONS


def create_assessment(topic: str, question_count: int = 5) -> list[AssessmentQuestion]:
    return list(select_question_bank(topic)[:question_count])


def grade_assessment(submission: AssessmentSubmission) -> AssessmentResult:
    """Score answers against ``correctAnswer``; a pass on a named course earns a badge."""
    questions = submission.questions
    correct = sum(
        1 for index, question in enumerate(questions) if submission.answers.get(index) == question.correct_answer
    )
    score = int(math.floor(correct / len(questions) * 100 + 0.5))
    passed = score >= PASSING_SCORE

    badge = None
    if passed and submission.course_title:
        earned_at = int(time.time() * 1000)
        badge = Badge(
            id=f"badge-{submission.course_id}-{earned_at}",
            title=f"{submission.course_title} Expert",
            description=f"Successfully completed assessment for {submission.course_title}",
            earned_at=earned_at,
            course_id=submission.course_id,
        )
    return AssessmentResult(passed=passed, score=score, badge=badge)
