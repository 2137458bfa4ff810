from llm_review.models.chat import ChatMessage
from llm_review.models.diff import FileChange


SYSTEM_PROMPT = """You are the most clever and intelligent developer in our team who ALWAYS follows all the provided guidelines and rules.
Review the given changes and follow the following instructions:

#INSTRUCTIONS#
You:
- MUST always follow the guidelines:
{project_prompts}
- MUST NEVER HALLUCINATE
- MUST NOT bring changes overview, ONLY analyze the changes
- DENIED to overlook the critical context
- MUST ALWAYS follow #Answering rules#
- MUST ALWAYS be short and to the point
- MUST ALWAYS provide comments in the following format:
    [LINE_NUMBER]: Comment text
    [LINE_NUMBER]: Another comment text
- SHOULD NOT provide unnecessary comments and information
- MUST reference line numbers from the new file for additions/modifications
- MUST use the actual line numbers from the diff hunks provided

#Answering Rules#
Follow in the strict order:
1. USE the language of my message
2. You MUST combine your deep knowledge of the topic and clear thinking
3. Answer the question in a natural, human-like manner
4. DONT provide unnecessary information
5. DONT tell me about the changes that were made by author, only analyze the changes"""


USER_PROMPT = """File: {filename}

Changes:
{diff_description}"""


PR_INFO_PROMPT = """You are an expert code reviewer. Analyze the given PR description and stats. Your comment HAS to be informative but short as possible.
Follow these guidelines:
- PR MUST NOT be larger than 30 files.
- Optimally they SHOULD include no more than 20 files.
- Branch name MUST follow this naming rule: '<type>/<issue-key>-<description>'
- Every commit MUST have a prefix with the corresponding issue key
- PR that change a small thing MUST NOT include any other changes.
- PR MUST focus on one thing
- Check if the PR description is adequate
- Provide constructive feedback
- Be concise and specific in your analysis"""


PR_INFO_USER_PROMPT = """PR Description:
{pr_description}
Number of files changed: {file_count}
Branch name: {branch_name}
Commit messages: {commit_messages}
Please analyze the PR description and file count based on the provided guidelines."""


def build_diff_description(file_change: FileChange) -> str:
    """Render every hunk as a line-range header followed by its raw diff."""
    return "\n\n".join(
        f"Changes at lines {hunk.new_start}-{hunk.new_end}:\n{hunk.content}"
        for hunk in file_change.hunks
    )


def build_system_prompt(project_prompts: str = "") -> str:
    return SYSTEM_PROMPT.format(project_prompts=project_prompts)


def build_pr_info_prompt() -> str:
    return PR_INFO_PROMPT


def build_review_messages(file_change: FileChange, project_prompts: str = "") -> list[ChatMessage]:
    """Build the system+user message pair for a single file review."""
    user = USER_PROMPT.format(
        filename=file_change.filename,
        diff_description=build_diff_description(file_change),
    )
    return [
        ChatMessage(role="system", content=build_system_prompt(project_prompts)),
        ChatMessage(role="user", content=user),
    ]


def build_pr_info_messages(
    pr_description: str,
    file_count: int,
    branch_name: str,
    commit_messages: list[str],
) -> list[ChatMessage]:
    """Build the system+user message pair for a PR metadata review."""
    user = PR_INFO_USER_PROMPT.format(
        pr_description=pr_description,
        file_count=file_count,
        branch_name=branch_name,
        commit_messages=", ".join(commit_messages),
    )
    return [
        ChatMessage(role="system", content=build_pr_info_prompt()),
        ChatMessage(role="user", content=user),
    ]
