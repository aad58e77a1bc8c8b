from dataclasses import dataclass

TEMPLATE_SUFFIX = ".gitattributes"


@dataclass(frozen=True)
class FileDescriptor:
    """
    Represents one .gitattributes template available in the remote repository.
    リモートリポジトリで利用可能な .gitattributes テンプレートを表します。

    Attributes:
        label (str): The remote file name without the ".gitattributes" suffix.
                     ".gitattributes" 接尾辞を除いたリモートファイル名。
        description (str): The full remote path of the template.
                           テンプレートのリモートパス全体。
        url (str): The remote path used to fetch the template content.
                   テンプレートの内容を取得するために使用するリモートパス。
    """
    label: str
    description: str
    url: str
