import argparse
import os
import sys
import traceback
from typing import List, Optional

from doc_mirror import config
from doc_mirror.constants import DOCS_ROUTE_PREFIX
from doc_mirror.logger import logger
from doc_mirror.manifest import CONTENT_MAP, Manifest, ManifestError, load_manifest, syncable_entries
from doc_mirror.sections import group_by_section
from doc_mirror.sync import SyncRequest, find_source_root, sync_docs
from doc_mirror.toc import collect_headings


def load_entries(manifest_path: Optional[str]) -> Manifest:
    """Load the manifest from ``manifest_path`` (or DOCMIRROR_MANIFEST), else the built-in content map."""
    path = manifest_path or config.DOCMIRROR_MANIFEST
    if not path:
        return CONTENT_MAP
    logger.info(f"加载清单文件: {path}", icon="⚙️ ")
    return load_manifest(path)


def run_sync(args) -> int:
    project_root = os.path.abspath(args.project_root)
    source_root = find_source_root(project_root, override=args.source_root)
    output_root = os.path.abspath(os.path.join(project_root, args.output_root or config.DOCMIRROR_OUTPUT_ROOT))

    manifest = load_entries(args.manifest)
    entries = syncable_entries(manifest)

    logger.header("同步文档", icon="🚀")
    if not os.path.isdir(source_root):
        logger.warning(f"源目录不存在: {source_root}，所有条目都将被跳过")
    logger.info(f"同步 {len(entries)} 个条目 (跳过 {len(manifest) - len(entries)} 个本地条目)", icon="⚡")

    # The full manifest is the link table so links to local pages still resolve
    outcome = sync_docs(SyncRequest(
        source_root=source_root,
        output_root=output_root,
        entries=entries,
        link_table=manifest,
    ))

    logger.success(f"已同步 {outcome.written} 篇文档，跳过 {outcome.skipped} 篇")
    return 0


def run_sections(args) -> int:
    manifest = load_entries(args.manifest)
    for group in group_by_section(manifest):
        logger.rule(group.section)
        for entry in group.items:
            marker = " (local)" if entry.local else ""
            print(f"  {DOCS_ROUTE_PREFIX}/{entry.id}  {entry.title}{marker}")
    return 0


def run_toc(args) -> int:
    with open(args.markdown, "r", encoding="utf-8") as f:
        headings = collect_headings(f.read())

    if not headings:
        logger.warning(f"未找到二级/三级标题: {args.markdown}")
        return 0
    for heading in headings:
        indent = "  " * (heading.level - 2)
        print(f"{indent}- {heading.text}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docmirror",
        description="DocMirror: 将 AFS 项目的 Markdown 文档同步到文档站点",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
示例:
  1. 同步所有非本地文档 (源目录自动检测或读取 AFS_SOURCE_ROOT):
     docmirror sync

  2. 指定源目录与输出目录:
     docmirror sync --source-root ../project-afs --output-root src/routes

  3. 查看侧边栏分组:
     docmirror sections

  4. 查看文档标题大纲:
     docmirror toc docs/guide.md
"""
    )
    subparsers = parser.add_subparsers(dest="command", help="操作类型")

    sync_parser = subparsers.add_parser("sync", help="同步源文档到站点")
    sync_parser.add_argument("--source-root", help="源项目目录 (默认: AFS_SOURCE_ROOT 或自动检测)")
    sync_parser.add_argument("--output-root", help="站点输出目录 (默认: DOCMIRROR_OUTPUT_ROOT 或 src/routes)")
    sync_parser.add_argument("--project-root", default=".", help="站点项目根目录 (默认: 当前目录)")
    sync_parser.add_argument("--manifest", help="JSON 清单文件 (默认: 内置清单)")
    sync_parser.set_defaults(handler=run_sync)

    sections_parser = subparsers.add_parser("sections", help="按分组列出清单条目")
    sections_parser.add_argument("--manifest", help="JSON 清单文件 (默认: 内置清单)")
    sections_parser.set_defaults(handler=run_sections)

    toc_parser = subparsers.add_parser("toc", help="打印 Markdown 文件的标题大纲")
    toc_parser.add_argument("markdown", help="Markdown 文件路径")
    toc_parser.set_defaults(handler=run_toc)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    # Plain "docmirror" (or options only) means sync
    if not argv or (argv[0].startswith("-") and argv[0] not in ("-h", "--help")):
        argv = ["sync"] + list(argv)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.handler(args)
    except ManifestError as e:
        logger.error(f"清单无效: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"任务失败: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
