def format_info(kind, result, score, nodes, elapsed, win_score):
        nps = int(nodes / elapsed) if elapsed > 0 else 0

        if abs(score) >= win_score:
            score_str = "win" if score > 0 else "loss"
        else:
            score_str = f"h {score:.1f}"

        if kind == "place":
            result_str = f"{result[0]},{result[1]}"
        else:
            result_str = f"{result:X}"

        return f"info {kind} {result_str} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)}"
