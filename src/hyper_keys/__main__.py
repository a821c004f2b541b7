from hyper_keys.karabiner.compiler import main

raise SystemExit(main())
