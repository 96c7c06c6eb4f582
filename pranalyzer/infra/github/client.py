from github import Auth, Github
from github.PullRequest import PullRequest


class GitHubClient:
    def __init__(self, token: str) -> None:
        self._client = Github(auth=Auth.Token(token))

    def get_pull(self, owner: str, repo: str, pr_number: int) -> PullRequest:
        return self._client.get_repo(f"{owner}/{repo}").get_pull(pr_number)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
