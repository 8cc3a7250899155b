# This file is generated by `python -m isolang generate`; do not edit it directly.
"""ISO 639-3 and ISO 639-1 codes, indexed by language discriminant."""

CODES = (
    ("aaa", None),
    ("aab", None),
    ("aac", None),
    ("aad", None),
    ("aae", None),
    ("aaf", None),
    ("aag", None),
    ("aah", None),
    ("aai", None),
    ("aak", None),
    ("aal", None),
    ("aan", None),
    ("aao", None),
    ("aap", None),
    ("aaq", None),
    ("aar", "aa"),
    ("aas", None),
    ("aat", None),
    ("aau", None),
    ("aaw", None),
    ("aax", None),
    ("aaz", None),
    ("aba", None),
    ("abb", None),
    ("abc", None),
    ("abd", None),
    ("abe", None),
    ("abf", None),
    ("abg", None),
    ("abh", None),
    ("abi", None),
    ("abj", None),
    ("abk", "ab"),
    ("abl", None),
    ("abm", None),
    ("abn", None),
    ("abo", None),
    ("abp", None),
    ("abq", None),
    ("abr", None),
    ("abs", None),
    ("abt", None),
    ("abu", None),
    ("abv", None),
    ("abw", None),
    ("abx", None),
    ("aby", None),
    ("abz", None),
    ("aca", None),
    ("acb", None),
    ("acd", None),
    ("ace", None),
    ("acf", None),
    ("ach", None),
    ("aci", None),
    ("ack", None),
    ("acl", None),
    ("acm", None),
    ("acn", None),
    ("acp", None),
    ("acq", None),
    ("acr", None),
    ("acs", None),
    ("act", None),
    ("acu", None),
    ("acv", None),
    ("acw", None),
    ("acx", None),
    ("acy", None),
    ("acz", None),
    ("ada", None),
    ("adb", None),
    ("add", None),
    ("ade", None),
    ("adf", None),
    ("adg", None),
    ("adh", None),
    ("adi", None),
    ("adj", None),
    ("adl", None),
    ("adn", None),
    ("ado", None),
    ("adq", None),
    ("adr", None),
    ("ads", None),
    ("adt", None),
    ("adu", None),
    ("adw", None),
    ("adx", None),
    ("ady", None),
    ("adz", None),
    ("aea", None),
    ("aeb", None),
    ("aec", None),
    ("aed", None),
    ("aee", None),
    ("aek", None),
    ("ael", None),
    ("aem", None),
    ("aen", None),
    ("aeq", None),
    ("aer", None),
    ("aes", None),
    ("aeu", None),
    ("aew", None),
    ("aey", None),
    ("aez", None),
    ("afb", None),
    ("afd", None),
    ("afe", None),
    ("afg", None),
    ("afh", None),
    ("afi", None),
    ("afk", None),
    ("afn", None),
    ("afo", None),
    ("afp", None),
    ("afr", "af"),
    ("afs", None),
    ("aft", None),
    ("afu", None),
    ("afz", None),
    ("aga", None),
    ("agb", None),
    ("agc", None),
    ("agd", None),
    ("age", None),
    ("agf", None),
    ("agg", None),
    ("agh", None),
    ("agi", None),
    ("agj", None),
    ("agk", None),
    ("agl", None),
    ("agm", None),
    ("agn", None),
    ("ago", None),
    ("agq", None),
    ("agr", None),
    ("ags", None),
    ("agt", None),
    ("agu", None),
    ("agv", None),
    ("agw", None),
    ("agx", None),
    ("agy", None),
    ("agz", None),
    ("aha", None),
    ("ahb", None),
    ("ahg", None),
    ("ahh", None),
    ("ahi", None),
    ("ahk", None),
    ("ahl", None),
    ("ahm", None),
    ("ahn", None),
    ("aho", None),
    ("ahp", None),
    ("ahr", None),
    ("ahs", None),
    ("aht", None),
    ("aia", None),
    ("aib", None),
    ("aic", None),
    ("aid", None),
    ("aie", None),
    ("aif", None),
    ("aig", None),
    ("aih", None),
    ("aii", None),
    ("aij", None),
    ("aik", None),
    ("ail", None),
    ("aim", None),
    ("ain", None),
    ("aio", None),
    ("aip", None),
    ("aiq", None),
    ("air", None),
    ("ait", None),
    ("aiw", None),
    ("aix", None),
    ("aiy", None),
    ("aja", None),
    ("ajg", None),
    ("aji", None),
    ("ajn", None),
    ("ajp", None),
    ("ajs", None),
    ("aju", None),
    ("ajw", None),
    ("ajz", None),
    ("aka", "ak"),
    ("akb", None),
    ("akc", None),
    ("akd", None),
    ("ake", None),
    ("akf", None),
    ("akg", None),
    ("akh", None),
    ("aki", None),
    ("akj", None),
    ("akk", None),
    ("akl", None),
    ("akm", None),
    ("ako", None),
    ("akp", None),
    ("akq", None),
    ("akr", None),
    ("aks", None),
    ("akt", None),
    ("aku", None),
    ("akv", None),
    ("akw", None),
    ("akx", None),
    ("aky", None),
    ("akz", None),
    ("ala", None),
    ("alc", None),
    ("ald", None),
    ("ale", None),
    ("alf", None),
    ("alh", None),
    ("ali", None),
    ("alj", None),
    ("alk", None),
    ("all", None),
    ("alm", None),
    ("aln", None),
    ("alo", None),
    ("alp", None),
    ("alq", None),
    ("alr", None),
    ("als", None),
    ("alt", None),
    ("alu", None),
    ("alw", None),
    ("alx", None),
    ("aly", None),
    ("alz", None),
    ("ama", None),
    ("amb", None),
    ("amc", None),
    ("ame", None),
    ("amf", None),
    ("amg", None),
    ("amh", "am"),
    ("ami", None),
    ("amj", None),
    ("amk", None),
    ("aml", None),
    ("amm", None),
    ("amn", None),
    ("amo", None),
    ("amp", None),
    ("amq", None),
    ("amr", None),
    ("ams", None),
    ("amt", None),
    ("amu", None),
    ("amv", None),
    ("amw", None),
    ("amx", None),
    ("amy", None),
    ("amz", None),
    ("ana", None),
    ("anb", None),
    ("anc", None),
    ("and", None),
    ("ane", None),
    ("anf", None),
    ("ang", None),
    ("anh", None),
    ("ani", None),
    ("anj", None),
    ("ank", None),
    ("anl", None),
    ("anm", None),
    ("ann", None),
    ("ano", None),
    ("anp", None),
    ("anq", None),
    ("anr", None),
    ("ans", None),
    ("ant", None),
    ("anu", None),
    ("anv", None),
    ("anw", None),
    ("anx", None),
    ("any", None),
    ("anz", None),
    ("aoa", None),
    ("aob", None),
    ("aoc", None),
    ("aod", None),
    ("aoe", None),
    ("aof", None),
    ("aog", None),
    ("aoi", None),
    ("aoj", None),
    ("aok", None),
    ("aol", None),
    ("aom", None),
    ("aon", None),
    ("aor", None),
    ("aos", None),
    ("aot", None),
    ("aou", None),
    ("aox", None),
    ("aoz", None),
    ("apb", None),
    ("apc", None),
    ("apd", None),
    ("ape", None),
    ("apf", None),
    ("apg", None),
    ("aph", None),
    ("api", None),
    ("apj", None),
    ("apk", None),
    ("apl", None),
    ("apm", None),
    ("apn", None),
    ("apo", None),
    ("app", None),
    ("apq", None),
    ("apr", None),
    ("aps", None),
    ("apt", None),
    ("apu", None),
    ("apv", None),
    ("apw", None),
    ("apx", None),
    ("apy", None),
    ("apz", None),
    ("aqc", None),
    ("aqd", None),
    ("aqg", None),
    ("aqk", None),
    ("aqm", None),
    ("aqn", None),
    ("aqp", None),
    ("aqr", None),
    ("aqt", None),
    ("aqz", None),
    ("ara", "ar"),
    ("arb", None),
    ("arc", None),
    ("ard", None),
    ("are", None),
    ("arg", "an"),
    ("arh", None),
    ("ari", None),
    ("arj", None),
    ("ark", None),
    ("arl", None),
    ("arn", None),
    ("aro", None),
    ("arp", None),
    ("arq", None),
    ("arr", None),
    ("ars", None),
    ("aru", None),
    ("arv", None),
    ("arw", None),
    ("arx", None),
    ("ary", None),
    ("arz", None),
    ("asa", None),
    ("asb", None),
    ("asc", None),
    ("ase", None),
    ("asf", None),
    ("asg", None),
    ("ash", None),
    ("asi", None),
    ("asj", None),
    ("ask", None),
    ("asl", None),
    ("asm", "as"),
    ("asn", None),
    ("aso", None),
    ("asp", None),
    ("asq", None),
    ("asr", None),
    ("ass", None),
    ("ast", None),
    ("asu", None),
    ("asv", None),
    ("asw", None),
    ("asx", None),
    ("asy", None),
    ("asz", None),
    ("ata", None),
    ("atb", None),
    ("atc", None),
    ("atd", None),
    ("ate", None),
    ("atg", None),
    ("ati", None),
    ("atj", None),
    ("atk", None),
    ("atl", None),
    ("atm", None),
    ("atn", None),
    ("ato", None),
    ("atp", None),
    ("atq", None),
    ("atr", None),
    ("ats", None),
    ("att", None),
    ("atu", None),
    ("atv", None),
    ("atw", None),
    ("atx", None),
    ("aty", None),
    ("atz", None),
    ("aua", None),
    ("aub", None),
    ("auc", None),
    ("aud", None),
    ("aug", None),
    ("auh", None),
    ("aui", None),
    ("auj", None),
    ("auk", None),
    ("aul", None),
    ("aum", None),
    ("aun", None),
    ("auo", None),
    ("aup", None),
    ("auq", None),
    ("aur", None),
    ("aut", None),
    ("auu", None),
    ("auw", None),
    ("aux", None),
    ("auy", None),
    ("auz", None),
    ("ava", "av"),
    ("avb", None),
    ("avd", None),
    ("ave", "ae"),
    ("avi", None),
    ("avk", None),
    ("avl", None),
    ("avm", None),
    ("avn", None),
    ("avo", None),
    ("avs", None),
    ("avt", None),
    ("avu", None),
    ("avv", None),
    ("awa", None),
    ("awb", None),
    ("awc", None),
    ("awe", None),
    ("awg", None),
    ("awh", None),
    ("awi", None),
    ("awk", None),
    ("awm", None),
    ("awn", None),
    ("awo", None),
    ("awr", None),
    ("aws", None),
    ("awt", None),
    ("awu", None),
    ("awv", None),
    ("aww", None),
    ("awx", None),
    ("awy", None),
    ("axb", None),
    ("axe", None),
    ("axg", None),
    ("axk", None),
    ("axl", None),
    ("axm", None),
    ("axx", None),
    ("aya", None),
    ("ayb", None),
    ("ayc", None),
    ("ayd", None),
    ("aye", None),
    ("ayg", None),
    ("ayh", None),
    ("ayi", None),
    ("ayk", None),
    ("ayl", None),
    ("aym", "ay"),
    ("ayn", None),
    ("ayo", None),
    ("ayp", None),
    ("ayq", None),
    ("ayr", None),
    ("ays", None),
    ("ayt", None),
    ("ayu", None),
    ("ayz", None),
    ("aza", None),
    ("azb", None),
    ("azd", None),
    ("aze", "az"),
    ("azg", None),
    ("azj", None),
    ("azm", None),
    ("azn", None),
    ("azo", None),
    ("azt", None),
    ("azz", None),
    ("baa", None),
    ("bab", None),
    ("bac", None),
    ("bae", None),
    ("baf", None),
    ("bag", None),
    ("bah", None),
    ("baj", None),
    ("bak", "ba"),
    ("bal", None),
    ("bam", "bm"),
    ("ban", None),
    ("bao", None),
    ("bap", None),
    ("bar", None),
    ("bas", None),
    ("bau", None),
    ("bav", None),
    ("baw", None),
    ("bax", None),
    ("bay", None),
    ("bba", None),
    ("bbb", None),
    ("bbc", None),
    ("bbd", None),
    ("bbe", None),
    ("bbf", None),
    ("bbg", None),
    ("bbh", None),
    ("bbi", None),
    ("bbj", None),
    ("bbk", None),
    ("bbl", None),
    ("bbm", None),
    ("bbn", None),
    ("bbo", None),
    ("bbp", None),
    ("bbq", None),
    ("bbr", None),
    ("bbs", None),
    ("bbt", None),
    ("bbu", None),
    ("bbv", None),
    ("bbw", None),
    ("bbx", None),
    ("bby", None),
    ("bca", None),
    ("bcb", None),
    ("bcc", None),
    ("bcd", None),
    ("bce", None),
    ("bcf", None),
    ("bcg", None),
    ("bch", None),
    ("bci", None),
    ("bcj", None),
    ("bck", None),
    ("bcl", None),
    ("bcm", None),
    ("bcn", None),
    ("bco", None),
    ("bcp", None),
    ("bcq", None),
    ("bcr", None),
    ("bcs", None),
    ("bct", None),
    ("bcu", None),
    ("bcv", None),
    ("bcw", None),
    ("bcy", None),
    ("bcz", None),
    ("bda", None),
    ("bdb", None),
    ("bdc", None),
    ("bdd", None),
    ("bde", None),
    ("bdf", None),
    ("bdg", None),
    ("bdh", None),
    ("bdi", None),
    ("bdj", None),
    ("bdk", None),
    ("bdl", None),
    ("bdm", None),
    ("bdn", None),
    ("bdo", None),
    ("bdp", None),
    ("bdq", None),
    ("bdr", None),
    ("bds", None),
    ("bdt", None),
    ("bdu", None),
    ("bdv", None),
    ("bdw", None),
    ("bdx", None),
    ("bdy", None),
    ("bdz", None),
    ("bea", None),
    ("beb", None),
    ("bec", None),
    ("bed", None),
    ("bee", None),
    ("bef", None),
    ("beg", None),
    ("beh", None),
    ("bei", None),
    ("bej", None),
    ("bek", None),
    ("bel", "be"),
    ("bem", None),
    ("ben", "bn"),
    ("beo", None),
    ("bep", None),
    ("beq", None),
    ("bes", None),
    ("bet", None),
    ("beu", None),
    ("bev", None),
    ("bew", None),
    ("bex", None),
    ("bey", None),
    ("bez", None),
    ("bfa", None),
    ("bfb", None),
    ("bfc", None),
    ("bfd", None),
    ("bfe", None),
    ("bff", None),
    ("bfg", None),
    ("bfh", None),
    ("bfi", None),
    ("bfj", None),
    ("bfk", None),
    ("bfl", None),
    ("bfm", None),
    ("bfn", None),
    ("bfo", None),
    ("bfp", None),
    ("bfq", None),
    ("bfr", None),
    ("bfs", None),
    ("bft", None),
    ("bfu", None),
    ("bfw", None),
    ("bfx", None),
    ("bfy", None),
    ("bfz", None),
    ("bga", None),
    ("bgb", None),
    ("bgc", None),
    ("bgd", None),
    ("bge", None),
    ("bgf", None),
    ("bgg", None),
    ("bgi", None),
    ("bgj", None),
    ("bgk", None),
    ("bgl", None),
    ("bgn", None),
    ("bgo", None),
    ("bgp", None),
    ("bgq", None),
    ("bgr", None),
    ("bgs", None),
    ("bgt", None),
    ("bgu", None),
    ("bgv", None),
    ("bgw", None),
    ("bgx", None),
    ("bgy", None),
    ("bgz", None),
    ("bha", None),
    ("bhb", None),
    ("bhc", None),
    ("bhd", None),
    ("bhe", None),
    ("bhf", None),
    ("bhg", None),
    ("bhh", None),
    ("bhi", None),
    ("bhj", None),
    ("bhl", None),
    ("bhm", None),
    ("bhn", None),
    ("bho", None),
    ("bhp", None),
    ("bhq", None),
    ("bhr", None),
    ("bhs", None),
    ("bht", None),
    ("bhu", None),
    ("bhv", None),
    ("bhw", None),
    ("bhx", None),
    ("bhy", None),
    ("bhz", None),
    ("bia", None),
    ("bib", None),
    ("bid", None),
    ("bie", None),
    ("bif", None),
    ("big", None),
    ("bik", None),
    ("bil", None),
    ("bim", None),
    ("bin", None),
    ("bio", None),
    ("bip", None),
    ("biq", None),
    ("bir", None),
    ("bis", "bi"),
    ("bit", None),
    ("biu", None),
    ("biv", None),
    ("biw", None),
    ("bix", None),
    ("biy", None),
    ("biz", None),
    ("bja", None),
    ("bjb", None),
    ("bjc", None),
    ("bje", None),
    ("bjf", None),
    ("bjg", None),
    ("bjh", None),
    ("bji", None),
    ("bjj", None),
    ("bjk", None),
    ("bjl", None),
    ("bjm", None),
    ("bjn", None),
    ("bjo", None),
    ("bjp", None),
    ("bjr", None),
    ("bjs", None),
    ("bjt", None),
    ("bju", None),
    ("bjv", None),
    ("bjw", None),
    ("bjx", None),
    ("bjy", None),
    ("bjz", None),
    ("bka", None),
    ("bkc", None),
    ("bkd", None),
    ("bkf", None),
    ("bkg", None),
    ("bkh", None),
    ("bki", None),
    ("bkj", None),
    ("bkk", None),
    ("bkl", None),
    ("bkm", None),
    ("bkn", None),
    ("bko", None),
    ("bkp", None),
    ("bkq", None),
    ("bkr", None),
    ("bks", None),
    ("bkt", None),
    ("bku", None),
    ("bkv", None),
    ("bkw", None),
    ("bkx", None),
    ("bky", None),
    ("bkz", None),
    ("bla", None),
    ("blb", None),
    ("blc", None),
    ("bld", None),
    ("ble", None),
    ("blf", None),
    ("blh", None),
    ("bli", None),
    ("blj", None),
    ("blk", None),
    ("bll", None),
    ("blm", None),
    ("bln", None),
    ("blo", None),
    ("blp", None),
    ("blq", None),
    ("blr", None),
    ("bls", None),
    ("blt", None),
    ("blv", None),
    ("blw", None),
    ("blx", None),
    ("bly", None),
    ("blz", None),
    ("bma", None),
    ("bmb", None),
    ("bmc", None),
    ("bmd", None),
    ("bme", None),
    ("bmf", None),
    ("bmg", None),
    ("bmh", None),
    ("bmi", None),
    ("bmj", None),
    ("bmk", None),
    ("bml", None),
    ("bmm", None),
    ("bmn", None),
    ("bmo", None),
    ("bmp", None),
    ("bmq", None),
    ("bmr", None),
    ("bms", None),
    ("bmt", None),
    ("bmu", None),
    ("bmv", None),
    ("bmw", None),
    ("bmx", None),
    ("bmz", None),
    ("bna", None),
    ("bnb", None),
    ("bnc", None),
    ("bnd", None),
    ("bne", None),
    ("bnf", None),
    ("bng", None),
    ("bni", None),
    ("bnj", None),
    ("bnk", None),
    ("bnl", None),
    ("bnm", None),
    ("bnn", None),
    ("bno", None),
    ("bnp", None),
    ("bnq", None),
    ("bnr", None),
    ("bns", None),
    ("bnu", None),
    ("bnv", None),
    ("bnw", None),
    ("bnx", None),
    ("bny", None),
    ("bnz", None),
    ("boa", None),
    ("bob", None),
    ("bod", "bo"),
    ("boe", None),
    ("bof", None),
    ("bog", None),
    ("boh", None),
    ("boi", None),
    ("boj", None),
    ("bok", None),
    ("bol", None),
    ("bom", None),
    ("bon", None),
    ("boo", None),
    ("bop", None),
    ("boq", None),
    ("bor", None),
    ("bos", "bs"),
    ("bot", None),
    ("bou", None),
    ("bov", None),
    ("bow", None),
    ("box", None),
    ("boy", None),
    ("boz", None),
    ("bpa", None),
    ("bpc", None),
    ("bpd", None),
    ("bpe", None),
    ("bpg", None),
    ("bph", None),
    ("bpi", None),
    ("bpj", None),
    ("bpk", None),
    ("bpl", None),
    ("bpm", None),
    ("bpn", None),
    ("bpo", None),
    ("bpp", None),
    ("bpq", None),
    ("bpr", None),
    ("bps", None),
    ("bpt", None),
    ("bpu", None),
    ("bpv", None),
    ("bpw", None),
    ("bpx", None),
    ("bpy", None),
    ("bpz", None),
    ("bqa", None),
    ("bqb", None),
    ("bqc", None),
    ("bqd", None),
    ("bqf", None),
    ("bqg", None),
    ("bqh", None),
    ("bqi", None),
    ("bqj", None),
    ("bqk", None),
    ("bql", None),
    ("bqm", None),
    ("bqn", None),
    ("bqo", None),
    ("bqp", None),
    ("bqq", None),
    ("bqr", None),
    ("bqs", None),
    ("bqt", None),
    ("bqu", None),
    ("bqv", None),
    ("bqw", None),
    ("bqx", None),
    ("bqy", None),
    ("bqz", None),
    ("bra", None),
    ("brb", None),
    ("brc", None),
    ("brd", None),
    ("bre", "br"),
    ("brf", None),
    ("brg", None),
    ("brh", None),
    ("bri", None),
    ("brj", None),
    ("brk", None),
    ("brl", None),
    ("brm", None),
    ("brn", None),
    ("bro", None),
    ("brp", None),
    ("brq", None),
    ("brr", None),
    ("brs", None),
    ("brt", None),
    ("bru", None),
    ("brv", None),
    ("brw", None),
    ("brx", None),
    ("bry", None),
    ("brz", None),
    ("bsa", None),
    ("bsb", None),
    ("bsc", None),
    ("bse", None),
    ("bsf", None),
    ("bsg", None),
    ("bsh", None),
    ("bsi", None),
    ("bsj", None),
    ("bsk", None),
    ("bsl", None),
    ("bsm", None),
    ("bsn", None),
    ("bso", None),
    ("bsp", None),
    ("bsq", None),
    ("bsr", None),
    ("bss", None),
    ("bst", None),
    ("bsu", None),
    ("bsv", None),
    ("bsw", None),
    ("bsx", None),
    ("bsy", None),
    ("bta", None),
    ("btc", None),
    ("btd", None),
    ("bte", None),
    ("btf", None),
    ("btg", None),
    ("bth", None),
    ("bti", None),
    ("btj", None),
    ("btm", None),
    ("btn", None),
    ("bto", None),
    ("btp", None),
    ("btq", None),
    ("btr", None),
    ("bts", None),
    ("btt", None),
    ("btu", None),
    ("btv", None),
    ("btw", None),
    ("btx", None),
    ("bty", None),
    ("btz", None),
    ("bua", None),
    ("bub", None),
    ("buc", None),
    ("bud", None),
    ("bue", None),
    ("buf", None),
    ("bug", None),
    ("buh", None),
    ("bui", None),
    ("buj", None),
    ("buk", None),
    ("bul", "bg"),
    ("bum", None),
    ("bun", None),
    ("buo", None),
    ("bup", None),
    ("buq", None),
    ("bus", None),
    ("but", None),
    ("buu", None),
    ("buv", None),
    ("buw", None),
    ("bux", None),
    ("buy", None),
    ("buz", None),
    ("bva", None),
    ("bvb", None),
    ("bvc", None),
    ("bvd", None),
    ("bve", None),
    ("bvf", None),
    ("bvg", None),
    ("bvh", None),
    ("bvi", None),
    ("bvj", None),
    ("bvk", None),
    ("bvl", None),
    ("bvm", None),
    ("bvn", None),
    ("bvo", None),
    ("bvp", None),
    ("bvq", None),
    ("bvr", None),
    ("bvt", None),
    ("bvu", None),
    ("bvv", None),
    ("bvw", None),
    ("bvx", None),
    ("bvy", None),
    ("bvz", None),
    ("bwa", None),
    ("bwb", None),
    ("bwc", None),
    ("bwd", None),
    ("bwe", None),
    ("bwf", None),
    ("bwg", None),
    ("bwh", None),
    ("bwi", None),
    ("bwj", None),
    ("bwk", None),
    ("bwl", None),
    ("bwm", None),
    ("bwn", None),
    ("bwo", None),
    ("bwp", None),
    ("bwq", None),
    ("bwr", None),
    ("bws", None),
    ("bwt", None),
    ("bwu", None),
    ("bww", None),
    ("bwx", None),
    ("bwy", None),
    ("bwz", None),
    ("bxa", None),
    ("bxb", None),
    ("bxc", None),
    ("bxd", None),
    ("bxe", None),
    ("bxf", None),
    ("bxg", None),
    ("bxh", None),
    ("bxi", None),
    ("bxj", None),
    ("bxk", None),
    ("bxl", None),
    ("bxm", None),
    ("bxn", None),
    ("bxo", None),
    ("bxp", None),
    ("bxq", None),
    ("bxr", None),
    ("bxs", None),
    ("bxu", None),
    ("bxv", None),
    ("bxw", None),
    ("bxz", None),
    ("bya", None),
    ("byb", None),
    ("byc", None),
    ("byd", None),
    ("bye", None),
    ("byf", None),
    ("byg", None),
    ("byh", None),
    ("byi", None),
    ("byj", None),
    ("byk", None),
    ("byl", None),
    ("bym", None),
    ("byn", None),
    ("byo", None),
    ("byp", None),
    ("byq", None),
    ("byr", None),
    ("bys", None),
    ("byt", None),
    ("byv", None),
    ("byw", None),
    ("byx", None),
    ("byz", None),
    ("bza", None),
    ("bzb", None),
    ("bzc", None),
    ("bzd", None),
    ("bze", None),
    ("bzf", None),
    ("bzg", None),
    ("bzh", None),
    ("bzi", None),
    ("bzj", None),
    ("bzk", None),
    ("bzl", None),
    ("bzm", None),
    ("bzn", None),
    ("bzo", None),
    ("bzp", None),
    ("bzq", None),
    ("bzr", None),
    ("bzs", None),
    ("bzt", None),
    ("bzu", None),
    ("bzv", None),
    ("bzw", None),
    ("bzx", None),
    ("bzy", None),
    ("bzz", None),
    ("caa", None),
    ("cab", None),
    ("cac", None),
    ("cad", None),
    ("cae", None),
    ("caf", None),
    ("cag", None),
    ("cah", None),
    ("caj", None),
    ("cak", None),
    ("cal", None),
    ("cam", None),
    ("can", None),
    ("cao", None),
    ("cap", None),
    ("caq", None),
    ("car", None),
    ("cas", None),
    ("cat", "ca"),
    ("cav", None),
    ("caw", None),
    ("cax", None),
    ("cay", None),
    ("caz", None),
    ("cbb", None),
    ("cbc", None),
    ("cbd", None),
    ("cbg", None),
    ("cbi", None),
    ("cbj", None),
    ("cbk", None),
    ("cbl", None),
    ("cbn", None),
    ("cbo", None),
    ("cbq", None),
    ("cbr", None),
    ("cbs", None),
    ("cbt", None),
    ("cbu", None),
    ("cbv", None),
    ("cbw", None),
    ("cby", None),
    ("ccc", None),
    ("ccd", None),
    ("cce", None),
    ("ccg", None),
    ("cch", None),
    ("ccj", None),
    ("ccl", None),
    ("ccm", None),
    ("cco", None),
    ("ccp", None),
    ("ccr", None),
    ("cda", None),
    ("cde", None),
    ("cdf", None),
    ("cdh", None),
    ("cdi", None),
    ("cdj", None),
    ("cdm", None),
    ("cdn", None),
    ("cdo", None),
    ("cdr", None),
    ("cds", None),
    ("cdy", None),
    ("cdz", None),
    ("cea", None),
    ("ceb", None),
    ("ceg", None),
    ("cek", None),
    ("cen", None),
    ("ces", "cs"),
    ("cet", None),
    ("cey", None),
    ("cfa", None),
    ("cfd", None),
    ("cfg", None),
    ("cfm", None),
    ("cga", None),
    ("cgc", None),
    ("cgg", None),
    ("cgk", None),
    ("cha", "ch"),
    ("chb", None),
    ("chc", None),
    ("chd", None),
    ("che", "ce"),
    ("chf", None),
    ("chg", None),
    ("chh", None),
    ("chj", None),
    ("chk", None),
    ("chl", None),
    ("chm", None),
    ("chn", None),
    ("cho", None),
    ("chp", None),
    ("chq", None),
    ("chr", None),
    ("cht", None),
    ("chu", "cu"),
    ("chv", "cv"),
    ("chw", None),
    ("chx", None),
    ("chy", None),
    ("chz", None),
    ("cia", None),
    ("cib", None),
    ("cic", None),
    ("cid", None),
    ("cie", None),
    ("cih", None),
    ("cik", None),
    ("cim", None),
    ("cin", None),
    ("cip", None),
    ("cir", None),
    ("ciw", None),
    ("ciy", None),
    ("cja", None),
    ("cje", None),
    ("cjh", None),
    ("cji", None),
    ("cjk", None),
    ("cjm", None),
    ("cjn", None),
    ("cjo", None),
    ("cjp", None),
    ("cjs", None),
    ("cjv", None),
    ("cjy", None),
    ("ckb", None),
    ("ckh", None),
    ("ckl", None),
    ("ckm", None),
    ("ckn", None),
    ("cko", None),
    ("ckq", None),
    ("ckr", None),
    ("cks", None),
    ("ckt", None),
    ("cku", None),
    ("ckv", None),
    ("ckx", None),
    ("cky", None),
    ("ckz", None),
    ("cla", None),
    ("clc", None),
    ("cld", None),
    ("cle", None),
    ("clh", None),
    ("cli", None),
    ("clj", None),
    ("clk", None),
    ("cll", None),
    ("clm", None),
    ("clo", None),
    ("clt", None),
    ("clu", None),
    ("clw", None),
    ("cly", None),
    ("cma", None),
    ("cme", None),
    ("cmg", None),
    ("cmi", None),
    ("cml", None),
    ("cmm", None),
    ("cmn", None),
    ("cmo", None),
    ("cmr", None),
    ("cms", None),
    ("cmt", None),
    ("cna", None),
    ("cnb", None),
    ("cnc", None),
    ("cng", None),
    ("cnh", None),
    ("cni", None),
    ("cnk", None),
    ("cnl", None),
    ("cno", None),
    ("cnp", None),
    ("cnq", None),
    ("cnr", None),
    ("cns", None),
    ("cnt", None),
    ("cnu", None),
    ("cnw", None),
    ("cnx", None),
    ("coa", None),
    ("cob", None),
    ("coc", None),
    ("cod", None),
    ("coe", None),
    ("cof", None),
    ("cog", None),
    ("coh", None),
    ("coj", None),
    ("cok", None),
    ("col", None),
    ("com", None),
    ("con", None),
    ("coo", None),
    ("cop", None),
    ("coq", None),
    ("cor", "kw"),
    ("cos", "co"),
    ("cot", None),
    ("cou", None),
    ("cov", None),
    ("cow", None),
    ("cox", None),
    ("coz", None),
    ("cpa", None),
    ("cpb", None),
    ("cpc", None),
    ("cpg", None),
    ("cpi", None),
    ("cpn", None),
    ("cpo", None),
    ("cps", None),
    ("cpu", None),
    ("cpx", None),
    ("cpy", None),
    ("cqd", None),
    ("cra", None),
    ("crb", None),
    ("crc", None),
    ("crd", None),
    ("cre", "cr"),
    ("crf", None),
    ("crg", None),
    ("crh", None),
    ("cri", None),
    ("crj", None),
    ("crk", None),
    ("crl", None),
    ("crm", None),
    ("crn", None),
    ("cro", None),
    ("crq", None),
    ("crr", None),
    ("crs", None),
    ("crt", None),
    ("crv", None),
    ("crw", None),
    ("crx", None),
    ("cry", None),
    ("crz", None),
    ("csa", None),
    ("csb", None),
    ("csc", None),
    ("csd", None),
    ("cse", None),
    ("csf", None),
    ("csg", None),
    ("csh", None),
    ("csi", None),
    ("csj", None),
    ("csk", None),
    ("csl", None),
    ("csm", None),
    ("csn", None),
    ("cso", None),
    ("csp", None),
    ("csq", None),
    ("csr", None),
    ("css", None),
    ("cst", None),
    ("csv", None),
    ("csw", None),
    ("csx", None),
    ("csy", None),
    ("csz", None),
    ("cta", None),
    ("ctc", None),
    ("ctd", None),
    ("cte", None),
    ("ctg", None),
    ("cth", None),
    ("ctl", None),
    ("ctm", None),
    ("ctn", None),
    ("cto", None),
    ("ctp", None),
    ("cts", None),
    ("ctt", None),
    ("ctu", None),
    ("cty", None),
    ("ctz", None),
    ("cua", None),
    ("cub", None),
    ("cuc", None),
    ("cuh", None),
    ("cui", None),
    ("cuj", None),
    ("cuk", None),
    ("cul", None),
    ("cuo", None),
    ("cup", None),
    ("cuq", None),
    ("cur", None),
    ("cut", None),
    ("cuu", None),
    ("cuv", None),
    ("cuw", None),
    ("cux", None),
    ("cuy", None),
    ("cvg", None),
    ("cvn", None),
    ("cwa", None),
    ("cwb", None),
    ("cwd", None),
    ("cwe", None),
    ("cwg", None),
    ("cwt", None),
    ("cya", None),
    ("cyb", None),
    ("cym", "cy"),
    ("cyo", None),
    ("czh", None),
    ("czk", None),
    ("czn", None),
    ("czo", None),
    ("czt", None),
    ("daa", None),
    ("dac", None),
    ("dad", None),
    ("dae", None),
    ("dag", None),
    ("dah", None),
    ("dai", None),
    ("daj", None),
    ("dak", None),
    ("dal", None),
    ("dam", None),
    ("dan", "da"),
    ("dao", None),
    ("daq", None),
    ("dar", None),
    ("das", None),
    ("dau", None),
    ("dav", None),
    ("daw", None),
    ("dax", None),
    ("daz", None),
    ("dba", None),
    ("dbb", None),
    ("dbd", None),
    ("dbe", None),
    ("dbf", None),
    ("dbg", None),
    ("dbi", None),
    ("dbj", None),
    ("dbl", None),
    ("dbm", None),
    ("dbn", None),
    ("dbo", None),
    ("dbp", None),
    ("dbq", None),
    ("dbr", None),
    ("dbt", None),
    ("dbu", None),
    ("dbv", None),
    ("dbw", None),
    ("dby", None),
    ("dcc", None),
    ("dcr", None),
    ("dda", None),
    ("ddd", None),
    ("dde", None),
    ("ddg", None),
    ("ddi", None),
    ("ddj", None),
    ("ddn", None),
    ("ddo", None),
    ("ddr", None),
    ("dds", None),
    ("ddw", None),
    ("dec", None),
    ("ded", None),
    ("dee", None),
    ("def", None),
    ("deg", None),
    ("deh", None),
    ("dei", None),
    ("dek", None),
    ("del", None),
    ("dem", None),
    ("den", None),
    ("dep", None),
    ("deq", None),
    ("der", None),
    ("des", None),
    ("deu", "de"),
    ("dev", None),
    ("dez", None),
    ("dga", None),
    ("dgb", None),
    ("dgc", None),
    ("dgd", None),
    ("dge", None),
    ("dgg", None),
    ("dgh", None),
    ("dgi", None),
    ("dgk", None),
    ("dgl", None),
    ("dgn", None),
    ("dgo", None),
    ("dgr", None),
    ("dgs", None),
    ("dgt", None),
    ("dgw", None),
    ("dgx", None),
    ("dgz", None),
    ("dhd", None),
    ("dhg", None),
    ("dhi", None),
    ("dhl", None),
    ("dhm", None),
    ("dhn", None),
    ("dho", None),
    ("dhr", None),
    ("dhs", None),
    ("dhu", None),
    ("dhv", None),
    ("dhw", None),
    ("dhx", None),
    ("dia", None),
    ("dib", None),
    ("dic", None),
    ("did", None),
    ("dif", None),
    ("dig", None),
    ("dih", None),
    ("dii", None),
    ("dij", None),
    ("dik", None),
    ("dil", None),
    ("dim", None),
    ("din", None),
    ("dio", None),
    ("dip", None),
    ("diq", None),
    ("dir", None),
    ("dis", None),
    ("diu", None),
    ("div", "dv"),
    ("diw", None),
    ("dix", None),
    ("diy", None),
    ("diz", None),
    ("dja", None),
    ("djb", None),
    ("djc", None),
    ("djd", None),
    ("dje", None),
    ("djf", None),
    ("dji", None),
    ("djj", None),
    ("djk", None),
    ("djm", None),
    ("djn", None),
    ("djo", None),
    ("djr", None),
    ("dju", None),
    ("djw", None),
    ("dka", None),
    ("dkg", None),
    ("dkk", None),
    ("dkr", None),
    ("dks", None),
    ("dkx", None),
    ("dlg", None),
    ("dlk", None),
    ("dlm", None),
    ("dln", None),
    ("dma", None),
    ("dmb", None),
    ("dmc", None),
    ("dmd", None),
    ("dme", None),
    ("dmf", None),
    ("dmg", None),
    ("dmk", None),
    ("dml", None),
    ("dmm", None),
    ("dmo", None),
    ("dmr", None),
    ("dms", None),
    ("dmu", None),
    ("dmv", None),
    ("dmw", None),
    ("dmx", None),
    ("dmy", None),
    ("dna", None),
    ("dnd", None),
    ("dne", None),
    ("dng", None),
    ("dni", None),
    ("dnj", None),
    ("dnk", None),
    ("dnn", None),
    ("dno", None),
    ("dnr", None),
    ("dnt", None),
    ("dnu", None),
    ("dnv", None),
    ("dnw", None),
    ("dny", None),
    ("doa", None),
    ("dob", None),
    ("doc", None),
    ("doe", None),
    ("dof", None),
    ("doh", None),
    ("doi", None),
    ("dok", None),
    ("dol", None),
    ("don", None),
    ("doo", None),
    ("dop", None),
    ("doq", None),
    ("dor", None),
    ("dos", None),
    ("dot", None),
    ("dov", None),
    ("dow", None),
    ("dox", None),
    ("doy", None),
    ("doz", None),
    ("dpp", None),
    ("drb", None),
    ("drc", None),
    ("drd", None),
    ("dre", None),
    ("drg", None),
    ("dri", None),
    ("drl", None),
    ("drn", None),
    ("dro", None),
    ("drq", None),
    ("drs", None),
    ("drt", None),
    ("dru", None),
    ("dry", None),
    ("dsb", None),
    ("dse", None),
    ("dsh", None),
    ("dsi", None),
    ("dsl", None),
    ("dsn", None),
    ("dso", None),
    ("dsq", None),
    ("dsz", None),
    ("dta", None),
    ("dtb", None),
    ("dtd", None),
    ("dth", None),
    ("dti", None),
    ("dtk", None),
    ("dtm", None),
    ("dtn", None),
    ("dto", None),
    ("dtp", None),
    ("dtr", None),
    ("dts", None),
    ("dtt", None),
    ("dtu", None),
    ("dty", None),
    ("dua", None),
    ("dub", None),
    ("duc", None),
    ("due", None),
    ("duf", None),
    ("dug", None),
    ("duh", None),
    ("dui", None),
    ("duk", None),
    ("dul", None),
    ("dum", None),
    ("dun", None),
    ("duo", None),
    ("dup", None),
    ("duq", None),
    ("dur", None),
    ("dus", None),
    ("duu", None),
    ("duv", None),
    ("duw", None),
    ("dux", None),
    ("duy", None),
    ("duz", None),
    ("dva", None),
    ("dwa", None),
    ("dwk", None),
    ("dwr", None),
    ("dws", None),
    ("dwu", None),
    ("dww", None),
    ("dwy", None),
    ("dwz", None),
    ("dya", None),
    ("dyb", None),
    ("dyd", None),
    ("dyg", None),
    ("dyi", None),
    ("dym", None),
    ("dyn", None),
    ("dyo", None),
    ("dyu", None),
    ("dyy", None),
    ("dza", None),
    ("dze", None),
    ("dzg", None),
    ("dzl", None),
    ("dzn", None),
    ("dzo", "dz"),
    ("eaa", None),
    ("ebc", None),
    ("ebg", None),
    ("ebk", None),
    ("ebo", None),
    ("ebr", None),
    ("ebu", None),
    ("ecr", None),
    ("ecs", None),
    ("ecy", None),
    ("eee", None),
    ("efa", None),
    ("efe", None),
    ("efi", None),
    ("ega", None),
    ("egl", None),
    ("egm", None),
    ("ego", None),
    ("egy", None),
    ("ehs", None),
    ("ehu", None),
    ("eip", None),
    ("eit", None),
    ("eiv", None),
    ("eja", None),
    ("eka", None),
    ("eke", None),
    ("ekg", None),
    ("eki", None),
    ("ekk", None),
    ("ekl", None),
    ("ekm", None),
    ("eko", None),
    ("ekp", None),
    ("ekr", None),
    ("eky", None),
    ("ele", None),
    ("elh", None),
    ("eli", None),
    ("elk", None),
    ("ell", "el"),
    ("elm", None),
    ("elo", None),
    ("elu", None),
    ("elx", None),
    ("ema", None),
    ("emb", None),
    ("eme", None),
    ("emg", None),
    ("emi", None),
    ("emk", None),
    ("emm", None),
    ("emn", None),
    ("emp", None),
    ("emq", None),
    ("ems", None),
    ("emu", None),
    ("emw", None),
    ("emx", None),
    ("emy", None),
    ("emz", None),
    ("ena", None),
    ("enb", None),
    ("enc", None),
    ("end", None),
    ("enf", None),
    ("eng", "en"),
    ("enh", None),
    ("enl", None),
    ("enm", None),
    ("enn", None),
    ("eno", None),
    ("enq", None),
    ("enr", None),
    ("enu", None),
    ("env", None),
    ("enw", None),
    ("enx", None),
    ("eot", None),
    ("epi", None),
    ("epo", "eo"),
    ("era", None),
    ("erg", None),
    ("erh", None),
    ("eri", None),
    ("erk", None),
    ("ero", None),
    ("err", None),
    ("ers", None),
    ("ert", None),
    ("erw", None),
    ("ese", None),
    ("esg", None),
    ("esh", None),
    ("esi", None),
    ("esk", None),
    ("esl", None),
    ("esm", None),
    ("esn", None),
    ("eso", None),
    ("esq", None),
    ("ess", None),
    ("est", "et"),
    ("esu", None),
    ("esy", None),
    ("etb", None),
    ("etc", None),
    ("eth", None),
    ("etn", None),
    ("eto", None),
    ("etr", None),
    ("ets", None),
    ("ett", None),
    ("etu", None),
    ("etx", None),
    ("etz", None),
    ("eus", "eu"),
    ("eve", None),
    ("evh", None),
    ("evn", None),
    ("ewe", "ee"),
    ("ewo", None),
    ("ext", None),
    ("eya", None),
    ("eyo", None),
    ("eza", None),
    ("eze", None),
    ("faa", None),
    ("fab", None),
    ("fad", None),
    ("faf", None),
    ("fag", None),
    ("fah", None),
    ("fai", None),
    ("faj", None),
    ("fak", None),
    ("fal", None),
    ("fam", None),
    ("fan", None),
    ("fao", "fo"),
    ("fap", None),
    ("far", None),
    ("fas", "fa"),
    ("fat", None),
    ("fau", None),
    ("fax", None),
    ("fay", None),
    ("faz", None),
    ("fbl", None),
    ("fcs", None),
    ("fer", None),
    ("ffi", None),
    ("ffm", None),
    ("fgr", None),
    ("fia", None),
    ("fie", None),
    ("fif", None),
    ("fij", "fj"),
    ("fil", None),
    ("fin", "fi"),
    ("fip", None),
    ("fir", None),
    ("fit", None),
    ("fiw", None),
    ("fkk", None),
    ("fkv", None),
    ("fla", None),
    ("flh", None),
    ("fli", None),
    ("fll", None),
    ("fln", None),
    ("flr", None),
    ("fly", None),
    ("fmp", None),
    ("fmu", None),
    ("fnb", None),
    ("fng", None),
    ("fni", None),
    ("fod", None),
    ("foi", None),
    ("fom", None),
    ("fon", None),
    ("for", None),
    ("fos", None),
    ("fpe", None),
    ("fqs", None),
    ("fra", "fr"),
    ("frc", None),
    ("frd", None),
    ("frk", None),
    ("frm", None),
    ("fro", None),
    ("frp", None),
    ("frq", None),
    ("frr", None),
    ("frs", None),
    ("frt", None),
    ("fry", "fy"),
    ("fse", None),
    ("fsl", None),
    ("fss", None),
    ("fub", None),
    ("fuc", None),
    ("fud", None),
    ("fue", None),
    ("fuf", None),
    ("fuh", None),
    ("fui", None),
    ("fuj", None),
    ("ful", "ff"),
    ("fum", None),
    ("fun", None),
    ("fuq", None),
    ("fur", None),
    ("fut", None),
    ("fuu", None),
    ("fuv", None),
    ("fuy", None),
    ("fvr", None),
    ("fwa", None),
    ("fwe", None),
    ("gaa", None),
    ("gab", None),
    ("gac", None),
    ("gad", None),
    ("gae", None),
    ("gaf", None),
    ("gag", None),
    ("gah", None),
    ("gai", None),
    ("gaj", None),
    ("gak", None),
    ("gal", None),
    ("gam", None),
    ("gan", None),
    ("gao", None),
    ("gap", None),
    ("gaq", None),
    ("gar", None),
    ("gas", None),
    ("gat", None),
    ("gau", None),
    ("gaw", None),
    ("gax", None),
    ("gay", None),
    ("gaz", None),
    ("gba", None),
    ("gbb", None),
    ("gbd", None),
    ("gbe", None),
    ("gbf", None),
    ("gbg", None),
    ("gbh", None),
    ("gbi", None),
    ("gbj", None),
    ("gbk", None),
    ("gbl", None),
    ("gbm", None),
    ("gbn", None),
    ("gbo", None),
    ("gbp", None),
    ("gbq", None),
    ("gbr", None),
    ("gbs", None),
    ("gbu", None),
    ("gbv", None),
    ("gbw", None),
    ("gbx", None),
    ("gby", None),
    ("gbz", None),
    ("gcc", None),
    ("gcd", None),
    ("gce", None),
    ("gcf", None),
    ("gcl", None),
    ("gcn", None),
    ("gcr", None),
    ("gct", None),
    ("gda", None),
    ("gdb", None),
    ("gdc", None),
    ("gdd", None),
    ("gde", None),
    ("gdf", None),
    ("gdg", None),
    ("gdh", None),
    ("gdi", None),
    ("gdj", None),
    ("gdk", None),
    ("gdl", None),
    ("gdm", None),
    ("gdn", None),
    ("gdo", None),
    ("gdq", None),
    ("gdr", None),
    ("gds", None),
    ("gdt", None),
    ("gdu", None),
    ("gdx", None),
    ("gea", None),
    ("geb", None),
    ("gec", None),
    ("ged", None),
    ("gef", None),
    ("geg", None),
    ("geh", None),
    ("gei", None),
    ("gej", None),
    ("gek", None),
    ("gel", None),
    ("geq", None),
    ("ges", None),
    ("gev", None),
    ("gew", None),
    ("gex", None),
    ("gey", None),
    ("gez", None),
    ("gfk", None),
    ("gft", None),
    ("gga", None),
    ("ggb", None),
    ("ggd", None),
    ("gge", None),
    ("ggg", None),
    ("ggk", None),
    ("ggl", None),
    ("ggt", None),
    ("ggu", None),
    ("ggw", None),
    ("gha", None),
    ("ghc", None),
    ("ghe", None),
    ("ghh", None),
    ("ghk", None),
    ("ghl", None),
    ("ghn", None),
    ("gho", None),
    ("ghr", None),
    ("ghs", None),
    ("ght", None),
    ("gia", None),
    ("gib", None),
    ("gic", None),
    ("gid", None),
    ("gie", None),
    ("gig", None),
    ("gih", None),
    ("gii", None),
    ("gil", None),
    ("gim", None),
    ("gin", None),
    ("gip", None),
    ("giq", None),
    ("gir", None),
    ("gis", None),
    ("git", None),
    ("giu", None),
    ("giw", None),
    ("gix", None),
    ("giy", None),
    ("giz", None),
    ("gjk", None),
    ("gjm", None),
    ("gjn", None),
    ("gjr", None),
    ("gju", None),
    ("gka", None),
    ("gkd", None),
    ("gke", None),
    ("gkn", None),
    ("gko", None),
    ("gkp", None),
    ("gku", None),
    ("gla", "gd"),
    ("glb", None),
    ("glc", None),
    ("gld", None),
    ("gle", "ga"),
    ("glg", "gl"),
    ("glh", None),
    ("glj", None),
    ("glk", None),
    ("gll", None),
    ("glo", None),
    ("glr", None),
    ("glu", None),
    ("glv", "gv"),
    ("glw", None),
    ("gly", None),
    ("gma", None),
    ("gmb", None),
    ("gmd", None),
    ("gmg", None),
    ("gmh", None),
    ("gml", None),
    ("gmm", None),
    ("gmn", None),
    ("gmr", None),
    ("gmu", None),
    ("gmv", None),
    ("gmx", None),
    ("gmy", None),
    ("gmz", None),
    ("gna", None),
    ("gnb", None),
    ("gnc", None),
    ("gnd", None),
    ("gne", None),
    ("gng", None),
    ("gnh", None),
    ("gni", None),
    ("gnj", None),
    ("gnk", None),
    ("gnl", None),
    ("gnm", None),
    ("gnn", None),
    ("gno", None),
    ("gnq", None),
    ("gnr", None),
    ("gnt", None),
    ("gnu", None),
    ("gnw", None),
    ("gnz", None),
    ("goa", None),
    ("gob", None),
    ("goc", None),
    ("god", None),
    ("goe", None),
    ("gof", None),
    ("gog", None),
    ("goh", None),
    ("goi", None),
    ("goj", None),
    ("gok", None),
    ("gol", None),
    ("gom", None),
    ("gon", None),
    ("goo", None),
    ("gop", None),
    ("goq", None),
    ("gor", None),
    ("gos", None),
    ("got", None),
    ("gou", None),
    ("gov", None),
    ("gow", None),
    ("gox", None),
    ("goy", None),
    ("goz", None),
    ("gpa", None),
    ("gpe", None),
    ("gpn", None),
    ("gqa", None),
    ("gqi", None),
    ("gqn", None),
    ("gqr", None),
    ("gqu", None),
    ("gra", None),
    ("grb", None),
    ("grc", None),
    ("grd", None),
    ("grg", None),
    ("grh", None),
    ("gri", None),
    ("grj", None),
    ("grm", None),
    ("grn", "gn"),
    ("gro", None),
    ("grq", None),
    ("grr", None),
    ("grs", None),
    ("grt", None),
    ("gru", None),
    ("grv", None),
    ("grw", None),
    ("grx", None),
    ("gry", None),
    ("grz", None),
    ("gse", None),
    ("gsg", None),
    ("gsl", None),
    ("gsm", None),
    ("gsn", None),
    ("gso", None),
    ("gsp", None),
    ("gss", None),
    ("gsw", None),
    ("gta", None),
    ("gtu", None),
    ("gua", None),
    ("gub", None),
    ("guc", None),
    ("gud", None),
    ("gue", None),
    ("guf", None),
    ("gug", None),
    ("guh", None),
    ("gui", None),
    ("guj", "gu"),
    ("guk", None),
    ("gul", None),
    ("gum", None),
    ("gun", None),
    ("guo", None),
    ("gup", None),
    ("guq", None),
    ("gur", None),
    ("gus", None),
    ("gut", None),
    ("guu", None),
    ("guw", None),
    ("gux", None),
    ("guz", None),
    ("gva", None),
    ("gvc", None),
    ("gve", None),
    ("gvf", None),
    ("gvj", None),
    ("gvl", None),
    ("gvm", None),
    ("gvn", None),
    ("gvo", None),
    ("gvp", None),
    ("gvr", None),
    ("gvs", None),
    ("gvy", None),
    ("gwa", None),
    ("gwb", None),
    ("gwc", None),
    ("gwd", None),
    ("gwe", None),
    ("gwf", None),
    ("gwg", None),
    ("gwi", None),
    ("gwj", None),
    ("gwm", None),
    ("gwn", None),
    ("gwr", None),
    ("gwt", None),
    ("gwu", None),
    ("gww", None),
    ("gwx", None),
    ("gxx", None),
    ("gya", None),
    ("gyb", None),
    ("gyd", None),
    ("gye", None),
    ("gyf", None),
    ("gyg", None),
    ("gyi", None),
    ("gyl", None),
    ("gym", None),
    ("gyn", None),
    ("gyo", None),
    ("gyr", None),
    ("gyy", None),
    ("gyz", None),
    ("gza", None),
    ("gzi", None),
    ("gzn", None),
    ("haa", None),
    ("hab", None),
    ("hac", None),
    ("had", None),
    ("hae", None),
    ("haf", None),
    ("hag", None),
    ("hah", None),
    ("hai", None),
    ("haj", None),
    ("hak", None),
    ("hal", None),
    ("ham", None),
    ("han", None),
    ("hao", None),
    ("hap", None),
    ("haq", None),
    ("har", None),
    ("has", None),
    ("hat", "ht"),
    ("hau", "ha"),
    ("hav", None),
    ("haw", None),
    ("hax", None),
    ("hay", None),
    ("haz", None),
    ("hba", None),
    ("hbb", None),
    ("hbn", None),
    ("hbo", None),
    ("hbs", "sh"),
    ("hbu", None),
    ("hca", None),
    ("hch", None),
    ("hdn", None),
    ("hds", None),
    ("hdy", None),
    ("hea", None),
    ("heb", "he"),
    ("hed", None),
    ("heg", None),
    ("heh", None),
    ("hei", None),
    ("hem", None),
    ("her", "hz"),
    ("hgm", None),
    ("hgw", None),
    ("hhi", None),
    ("hhr", None),
    ("hhy", None),
    ("hia", None),
    ("hib", None),
    ("hid", None),
    ("hif", None),
    ("hig", None),
    ("hih", None),
    ("hii", None),
    ("hij", None),
    ("hik", None),
    ("hil", None),
    ("hin", "hi"),
    ("hio", None),
    ("hir", None),
    ("hit", None),
    ("hiw", None),
    ("hix", None),
    ("hji", None),
    ("hka", None),
    ("hke", None),
    ("hkh", None),
    ("hkk", None),
    ("hkn", None),
    ("hks", None),
    ("hla", None),
    ("hlb", None),
    ("hld", None),
    ("hle", None),
    ("hlt", None),
    ("hlu", None),
    ("hma", None),
    ("hmb", None),
    ("hmc", None),
    ("hmd", None),
    ("hme", None),
    ("hmf", None),
    ("hmg", None),
    ("hmh", None),
    ("hmi", None),
    ("hmj", None),
    ("hmk", None),
    ("hml", None),
    ("hmm", None),
    ("hmn", None),
    ("hmo", "ho"),
    ("hmp", None),
    ("hmq", None),
    ("hmr", None),
    ("hms", None),
    ("hmt", None),
    ("hmu", None),
    ("hmv", None),
    ("hmw", None),
    ("hmy", None),
    ("hmz", None),
    ("hna", None),
    ("hnd", None),
    ("hne", None),
    ("hng", None),
    ("hnh", None),
    ("hni", None),
    ("hnj", None),
    ("hnn", None),
    ("hno", None),
    ("hns", None),
    ("hnu", None),
    ("hoa", None),
    ("hob", None),
    ("hoc", None),
    ("hod", None),
    ("hoe", None),
    ("hoh", None),
    ("hoi", None),
    ("hoj", None),
    ("hol", None),
    ("hom", None),
    ("hoo", None),
    ("hop", None),
    ("hor", None),
    ("hos", None),
    ("hot", None),
    ("hov", None),
    ("how", None),
    ("hoy", None),
    ("hoz", None),
    ("hpo", None),
    ("hps", None),
    ("hra", None),
    ("hrc", None),
    ("hre", None),
    ("hrk", None),
    ("hrm", None),
    ("hro", None),
    ("hrp", None),
    ("hrt", None),
    ("hru", None),
    ("hrv", "hr"),
    ("hrw", None),
    ("hrx", None),
    ("hrz", None),
    ("hsb", None),
    ("hsh", None),
    ("hsl", None),
    ("hsn", None),
    ("hss", None),
    ("hti", None),
    ("hto", None),
    ("hts", None),
    ("htu", None),
    ("htx", None),
    ("hub", None),
    ("huc", None),
    ("hud", None),
    ("hue", None),
    ("huf", None),
    ("hug", None),
    ("huh", None),
    ("hui", None),
    ("huj", None),
    ("huk", None),
    ("hul", None),
    ("hum", None),
    ("hun", "hu"),
    ("huo", None),
    ("hup", None),
    ("huq", None),
    ("hur", None),
    ("hus", None),
    ("hut", None),
    ("huu", None),
    ("huv", None),
    ("huw", None),
    ("hux", None),
    ("huy", None),
    ("huz", None),
    ("hvc", None),
    ("hve", None),
    ("hvk", None),
    ("hvn", None),
    ("hvv", None),
    ("hwa", None),
    ("hwc", None),
    ("hwo", None),
    ("hya", None),
    ("hye", "hy"),
    ("hyw", None),
    ("iai", None),
    ("ian", None),
    ("iar", None),
    ("iba", None),
    ("ibb", None),
    ("ibd", None),
    ("ibe", None),
    ("ibg", None),
    ("ibh", None),
    ("ibl", None),
    ("ibm", None),
    ("ibn", None),
    ("ibo", "ig"),
    ("ibr", None),
    ("ibu", None),
    ("iby", None),
    ("ica", None),
    ("ich", None),
    ("icl", None),
    ("icr", None),
    ("ida", None),
    ("idb", None),
    ("idc", None),
    ("idd", None),
    ("ide", None),
    ("idi", None),
    ("ido", "io"),
    ("idr", None),
    ("ids", None),
    ("idt", None),
    ("idu", None),
    ("ifa", None),
    ("ifb", None),
    ("ife", None),
    ("iff", None),
    ("ifk", None),
    ("ifm", None),
    ("ifu", None),
    ("ify", None),
    ("igb", None),
    ("ige", None),
    ("igg", None),
    ("igl", None),
    ("igm", None),
    ("ign", None),
    ("igo", None),
    ("igs", None),
    ("igw", None),
    ("ihb", None),
    ("ihi", None),
    ("ihp", None),
    ("ihw", None),
    ("iii", "ii"),
    ("iin", None),
    ("ijc", None),
    ("ije", None),
    ("ijj", None),
    ("ijn", None),
    ("ijs", None),
    ("ike", None),
    ("iki", None),
    ("ikk", None),
    ("ikl", None),
    ("iko", None),
    ("ikp", None),
    ("ikr", None),
    ("iks", None),
    ("ikt", None),
    ("iku", "iu"),
    ("ikv", None),
    ("ikw", None),
    ("ikx", None),
    ("ikz", None),
    ("ila", None),
    ("ilb", None),
    ("ile", "ie"),
    ("ilg", None),
    ("ili", None),
    ("ilk", None),
    ("ilm", None),
    ("ilo", None),
    ("ilp", None),
    ("ils", None),
    ("ilu", None),
    ("ilv", None),
    ("ima", None),
    ("imi", None),
    ("iml", None),
    ("imn", None),
    ("imo", None),
    ("imr", None),
    ("ims", None),
    ("imt", None),
    ("imy", None),
    ("ina", "ia"),
    ("inb", None),
    ("ind", "id"),
    ("ing", None),
    ("inh", None),
    ("inj", None),
    ("inl", None),
    ("inm", None),
    ("inn", None),
    ("ino", None),
    ("inp", None),
    ("ins", None),
    ("int", None),
    ("inz", None),
    ("ior", None),
    ("iou", None),
    ("iow", None),
    ("ipi", None),
    ("ipk", "ik"),
    ("ipo", None),
    ("iqu", None),
    ("iqw", None),
    ("ire", None),
    ("irh", None),
    ("iri", None),
    ("irk", None),
    ("irn", None),
    ("irr", None),
    ("iru", None),
    ("irx", None),
    ("iry", None),
    ("isa", None),
    ("isc", None),
    ("isd", None),
    ("ise", None),
    ("isg", None),
    ("ish", None),
    ("isi", None),
    ("isk", None),
    ("isl", "is"),
    ("ism", None),
    ("isn", None),
    ("iso", None),
    ("isr", None),
    ("ist", None),
    ("isu", None),
    ("ita", "it"),
    ("itb", None),
    ("itd", None),
    ("ite", None),
    ("iti", None),
    ("itk", None),
    ("itl", None),
    ("itm", None),
    ("ito", None),
    ("itr", None),
    ("its", None),
    ("itt", None),
    ("itv", None),
    ("itw", None),
    ("itx", None),
    ("ity", None),
    ("itz", None),
    ("ium", None),
    ("ivb", None),
    ("ivv", None),
    ("iwk", None),
    ("iwm", None),
    ("iwo", None),
    ("iws", None),
    ("ixc", None),
    ("ixl", None),
    ("iya", None),
    ("iyo", None),
    ("iyx", None),
    ("izh", None),
    ("izr", None),
    ("izz", None),
    ("jaa", None),
    ("jab", None),
    ("jac", None),
    ("jad", None),
    ("jae", None),
    ("jaf", None),
    ("jah", None),
    ("jaj", None),
    ("jak", None),
    ("jal", None),
    ("jam", None),
    ("jan", None),
    ("jao", None),
    ("jaq", None),
    ("jas", None),
    ("jat", None),
    ("jau", None),
    ("jav", "jv"),
    ("jax", None),
    ("jay", None),
    ("jaz", None),
    ("jbe", None),
    ("jbi", None),
    ("jbj", None),
    ("jbk", None),
    ("jbm", None),
    ("jbn", None),
    ("jbo", None),
    ("jbr", None),
    ("jbt", None),
    ("jbu", None),
    ("jbw", None),
    ("jcs", None),
    ("jct", None),
    ("jda", None),
    ("jdg", None),
    ("jdt", None),
    ("jeb", None),
    ("jee", None),
    ("jeh", None),
    ("jei", None),
    ("jek", None),
    ("jel", None),
    ("jen", None),
    ("jer", None),
    ("jet", None),
    ("jeu", None),
    ("jgb", None),
    ("jge", None),
    ("jgk", None),
    ("jgo", None),
    ("jhi", None),
    ("jhs", None),
    ("jia", None),
    ("jib", None),
    ("jic", None),
    ("jid", None),
    ("jie", None),
    ("jig", None),
    ("jih", None),
    ("jii", None),
    ("jil", None),
    ("jim", None),
    ("jio", None),
    ("jiq", None),
    ("jit", None),
    ("jiu", None),
    ("jiv", None),
    ("jiy", None),
    ("jje", None),
    ("jjr", None),
    ("jka", None),
    ("jkm", None),
    ("jko", None),
    ("jkp", None),
    ("jkr", None),
    ("jks", None),
    ("jku", None),
    ("jle", None),
    ("jls", None),
    ("jma", None),
    ("jmb", None),
    ("jmc", None),
    ("jmd", None),
    ("jmi", None),
    ("jml", None),
    ("jmn", None),
    ("jmr", None),
    ("jms", None),
    ("jmw", None),
    ("jmx", None),
    ("jna", None),
    ("jnd", None),
    ("jng", None),
    ("jni", None),
    ("jnj", None),
    ("jnl", None),
    ("jns", None),
    ("job", None),
    ("jod", None),
    ("jog", None),
    ("jor", None),
    ("jos", None),
    ("jow", None),
    ("jpa", None),
    ("jpn", "ja"),
    ("jpr", None),
    ("jqr", None),
    ("jra", None),
    ("jrb", None),
    ("jrr", None),
    ("jrt", None),
    ("jru", None),
    ("jsl", None),
    ("jua", None),
    ("jub", None),
    ("juc", None),
    ("jud", None),
    ("juh", None),
    ("jui", None),
    ("juk", None),
    ("jul", None),
    ("jum", None),
    ("jun", None),
    ("juo", None),
    ("jup", None),
    ("jur", None),
    ("jus", None),
    ("jut", None),
    ("juu", None),
    ("juw", None),
    ("juy", None),
    ("jvd", None),
    ("jvn", None),
    ("jwi", None),
    ("jya", None),
    ("jye", None),
    ("jyy", None),
    ("kaa", None),
    ("kab", None),
    ("kac", None),
    ("kad", None),
    ("kae", None),
    ("kaf", None),
    ("kag", None),
    ("kah", None),
    ("kai", None),
    ("kaj", None),
    ("kak", None),
    ("kal", "kl"),
    ("kam", None),
    ("kan", "kn"),
    ("kao", None),
    ("kap", None),
    ("kaq", None),
    ("kas", "ks"),
    ("kat", "ka"),
    ("kau", "kr"),
    ("kav", None),
    ("kaw", None),
    ("kax", None),
    ("kay", None),
    ("kaz", "kk"),
    ("kba", None),
    ("kbb", None),
    ("kbc", None),
    ("kbd", None),
    ("kbe", None),
    ("kbg", None),
    ("kbh", None),
    ("kbi", None),
    ("kbj", None),
    ("kbk", None),
    ("kbl", None),
    ("kbm", None),
    ("kbn", None),
    ("kbo", None),
    ("kbp", None),
    ("kbq", None),
    ("kbr", None),
    ("kbs", None),
    ("kbt", None),
    ("kbu", None),
    ("kbv", None),
    ("kbw", None),
    ("kbx", None),
    ("kby", None),
    ("kbz", None),
    ("kca", None),
    ("kcb", None),
    ("kcc", None),
    ("kcd", None),
    ("kce", None),
    ("kcf", None),
    ("kcg", None),
    ("kch", None),
    ("kci", None),
    ("kcj", None),
    ("kck", None),
    ("kcl", None),
    ("kcm", None),
    ("kcn", None),
    ("kco", None),
    ("kcp", None),
    ("kcq", None),
    ("kcr", None),
    ("kcs", None),
    ("kct", None),
    ("kcu", None),
    ("kcv", None),
    ("kcw", None),
    ("kcx", None),
    ("kcy", None),
    ("kcz", None),
    ("kda", None),
    ("kdc", None),
    ("kdd", None),
    ("kde", None),
    ("kdf", None),
    ("kdg", None),
    ("kdh", None),
    ("kdi", None),
    ("kdj", None),
    ("kdk", None),
    ("kdl", None),
    ("kdm", None),
    ("kdn", None),
    ("kdp", None),
    ("kdq", None),
    ("kdr", None),
    ("kdt", None),
    ("kdu", None),
    ("kdw", None),
    ("kdx", None),
    ("kdy", None),
    ("kdz", None),
    ("kea", None),
    ("keb", None),
    ("kec", None),
    ("ked", None),
    ("kee", None),
    ("kef", None),
    ("keg", None),
    ("keh", None),
    ("kei", None),
    ("kej", None),
    ("kek", None),
    ("kel", None),
    ("kem", None),
    ("ken", None),
    ("keo", None),
    ("kep", None),
    ("keq", None),
    ("ker", None),
    ("kes", None),
    ("ket", None),
    ("keu", None),
    ("kev", None),
    ("kew", None),
    ("kex", None),
    ("key", None),
    ("kez", None),
    ("kfa", None),
    ("kfb", None),
    ("kfc", None),
    ("kfd", None),
    ("kfe", None),
    ("kff", None),
    ("kfg", None),
    ("kfh", None),
    ("kfi", None),
    ("kfj", None),
    ("kfk", None),
    ("kfl", None),
    ("kfm", None),
    ("kfn", None),
    ("kfo", None),
    ("kfp", None),
    ("kfq", None),
    ("kfr", None),
    ("kfs", None),
    ("kft", None),
    ("kfu", None),
    ("kfv", None),
    ("kfw", None),
    ("kfx", None),
    ("kfy", None),
    ("kfz", None),
    ("kga", None),
    ("kgb", None),
    ("kge", None),
    ("kgf", None),
    ("kgg", None),
    ("kgi", None),
    ("kgj", None),
    ("kgk", None),
    ("kgl", None),
    ("kgm", None),
    ("kgn", None),
    ("kgo", None),
    ("kgp", None),
    ("kgq", None),
    ("kgr", None),
    ("kgs", None),
    ("kgt", None),
    ("kgu", None),
    ("kgv", None),
    ("kgw", None),
    ("kgx", None),
    ("kgy", None),
    ("kha", None),
    ("khb", None),
    ("khc", None),
    ("khd", None),
    ("khe", None),
    ("khf", None),
    ("khg", None),
    ("khh", None),
    ("khj", None),
    ("khk", None),
    ("khl", None),
    ("khm", "km"),
    ("khn", None),
    ("kho", None),
    ("khp", None),
    ("khq", None),
    ("khr", None),
    ("khs", None),
    ("kht", None),
    ("khu", None),
    ("khv", None),
    ("khw", None),
    ("khx", None),
    ("khy", None),
    ("khz", None),
    ("kia", None),
    ("kib", None),
    ("kic", None),
    ("kid", None),
    ("kie", None),
    ("kif", None),
    ("kig", None),
    ("kih", None),
    ("kii", None),
    ("kij", None),
    ("kik", "ki"),
    ("kil", None),
    ("kim", None),
    ("kin", "rw"),
    ("kio", None),
    ("kip", None),
    ("kiq", None),
    ("kir", "ky"),
    ("kis", None),
    ("kit", None),
    ("kiu", None),
    ("kiv", None),
    ("kiw", None),
    ("kix", None),
    ("kiy", None),
    ("kiz", None),
    ("kja", None),
    ("kjb", None),
    ("kjc", None),
    ("kjd", None),
    ("kje", None),
    ("kjg", None),
    ("kjh", None),
    ("kji", None),
    ("kjj", None),
    ("kjk", None),
    ("kjl", None),
    ("kjm", None),
    ("kjn", None),
    ("kjo", None),
    ("kjp", None),
    ("kjq", None),
    ("kjr", None),
    ("kjs", None),
    ("kjt", None),
    ("kju", None),
    ("kjv", None),
    ("kjx", None),
    ("kjy", None),
    ("kjz", None),
    ("kka", None),
    ("kkb", None),
    ("kkc", None),
    ("kkd", None),
    ("kke", None),
    ("kkf", None),
    ("kkg", None),
    ("kkh", None),
    ("kki", None),
    ("kkj", None),
    ("kkk", None),
    ("kkl", None),
    ("kkm", None),
    ("kkn", None),
    ("kko", None),
    ("kkp", None),
    ("kkq", None),
    ("kkr", None),
    ("kks", None),
    ("kkt", None),
    ("kku", None),
    ("kkv", None),
    ("kkw", None),
    ("kkx", None),
    ("kky", None),
    ("kkz", None),
    ("kla", None),
    ("klb", None),
    ("klc", None),
    ("kld", None),
    ("kle", None),
    ("klf", None),
    ("klg", None),
    ("klh", None),
    ("kli", None),
    ("klj", None),
    ("klk", None),
    ("kll", None),
    ("klm", None),
    ("kln", None),
    ("klo", None),
    ("klp", None),
    ("klq", None),
    ("klr", None),
    ("kls", None),
    ("klt", None),
    ("klu", None),
    ("klv", None),
    ("klw", None),
    ("klx", None),
    ("kly", None),
    ("klz", None),
    ("kma", None),
    ("kmb", None),
    ("kmc", None),
    ("kmd", None),
    ("kme", None),
    ("kmf", None),
    ("kmg", None),
    ("kmh", None),
    ("kmi", None),
    ("kmj", None),
    ("kmk", None),
    ("kml", None),
    ("kmm", None),
    ("kmn", None),
    ("kmo", None),
    ("kmp", None),
    ("kmq", None),
    ("kmr", None),
    ("kms", None),
    ("kmt", None),
    ("kmu", None),
    ("kmv", None),
    ("kmw", None),
    ("kmx", None),
    ("kmy", None),
    ("kmz", None),
    ("kna", None),
    ("knb", None),
    ("knc", None),
    ("knd", None),
    ("kne", None),
    ("knf", None),
    ("kng", None),
    ("kni", None),
    ("knj", None),
    ("knk", None),
    ("knl", None),
    ("knm", None),
    ("knn", None),
    ("kno", None),
    ("knp", None),
    ("knq", None),
    ("knr", None),
    ("kns", None),
    ("knt", None),
    ("knu", None),
    ("knv", None),
    ("knw", None),
    ("knx", None),
    ("kny", None),
    ("knz", None),
    ("koa", None),
    ("koc", None),
    ("kod", None),
    ("koe", None),
    ("kof", None),
    ("kog", None),
    ("koh", None),
    ("koi", None),
    ("kok", None),
    ("kol", None),
    ("kom", "kv"),
    ("kon", "kg"),
    ("koo", None),
    ("kop", None),
    ("koq", None),
    ("kor", "ko"),
    ("kos", None),
    ("kot", None),
    ("kou", None),
    ("kov", None),
    ("kow", None),
    ("koy", None),
    ("koz", None),
    ("kpa", None),
    ("kpb", None),
    ("kpc", None),
    ("kpd", None),
    ("kpe", None),
    ("kpf", None),
    ("kpg", None),
    ("kph", None),
    ("kpi", None),
    ("kpj", None),
    ("kpk", None),
    ("kpl", None),
    ("kpm", None),
    ("kpn", None),
    ("kpo", None),
    ("kpq", None),
    ("kpr", None),
    ("kps", None),
    ("kpt", None),
    ("kpu", None),
    ("kpv", None),
    ("kpw", None),
    ("kpx", None),
    ("kpy", None),
    ("kpz", None),
    ("kqa", None),
    ("kqb", None),
    ("kqc", None),
    ("kqd", None),
    ("kqe", None),
    ("kqf", None),
    ("kqg", None),
    ("kqh", None),
    ("kqi", None),
    ("kqj", None),
    ("kqk", None),
    ("kql", None),
    ("kqm", None),
    ("kqn", None),
    ("kqo", None),
    ("kqp", None),
    ("kqq", None),
    ("kqr", None),
    ("kqs", None),
    ("kqt", None),
    ("kqu", None),
    ("kqv", None),
    ("kqw", None),
    ("kqx", None),
    ("kqy", None),
    ("kqz", None),
    ("kra", None),
    ("krb", None),
    ("krc", None),
    ("krd", None),
    ("kre", None),
    ("krf", None),
    ("krh", None),
    ("kri", None),
    ("krj", None),
    ("krk", None),
    ("krl", None),
    ("krn", None),
    ("krp", None),
    ("krr", None),
    ("krs", None),
    ("krt", None),
    ("kru", None),
    ("krv", None),
    ("krw", None),
    ("krx", None),
    ("kry", None),
    ("krz", None),
    ("ksa", None),
    ("ksb", None),
    ("ksc", None),
    ("ksd", None),
    ("kse", None),
    ("ksf", None),
    ("ksg", None),
    ("ksh", None),
    ("ksi", None),
    ("ksj", None),
    ("ksk", None),
    ("ksl", None),
    ("ksm", None),
    ("ksn", None),
    ("kso", None),
    ("ksp", None),
    ("ksq", None),
    ("ksr", None),
    ("kss", None),
    ("kst", None),
    ("ksu", None),
    ("ksv", None),
    ("ksw", None),
    ("ksx", None),
    ("ksy", None),
    ("ksz", None),
    ("kta", None),
    ("ktb", None),
    ("ktc", None),
    ("ktd", None),
    ("kte", None),
    ("ktf", None),
    ("ktg", None),
    ("kth", None),
    ("kti", None),
    ("ktj", None),
    ("ktk", None),
    ("ktl", None),
    ("ktm", None),
    ("ktn", None),
    ("kto", None),
    ("ktp", None),
    ("ktq", None),
    ("kts", None),
    ("ktt", None),
    ("ktu", None),
    ("ktv", None),
    ("ktw", None),
    ("ktx", None),
    ("kty", None),
    ("ktz", None),
    ("kua", "kj"),
    ("kub", None),
    ("kuc", None),
    ("kud", None),
    ("kue", None),
    ("kuf", None),
    ("kug", None),
    ("kuh", None),
    ("kui", None),
    ("kuj", None),
    ("kuk", None),
    ("kul", None),
    ("kum", None),
    ("kun", None),
    ("kuo", None),
    ("kup", None),
    ("kuq", None),
    ("kur", "ku"),
    ("kus", None),
    ("kut", None),
    ("kuu", None),
    ("kuv", None),
    ("kuw", None),
    ("kux", None),
    ("kuy", None),
    ("kuz", None),
    ("kva", None),
    ("kvb", None),
    ("kvc", None),
    ("kvd", None),
    ("kve", None),
    ("kvf", None),
    ("kvg", None),
    ("kvh", None),
    ("kvi", None),
    ("kvj", None),
    ("kvk", None),
    ("kvl", None),
    ("kvm", None),
    ("kvn", None),
    ("kvo", None),
    ("kvp", None),
    ("kvq", None),
    ("kvr", None),
    ("kvt", None),
    ("kvu", None),
    ("kvv", None),
    ("kvw", None),
    ("kvx", None),
    ("kvy", None),
    ("kvz", None),
    ("kwa", None),
    ("kwb", None),
    ("kwc", None),
    ("kwd", None),
    ("kwe", None),
    ("kwf", None),
    ("kwg", None),
    ("kwh", None),
    ("kwi", None),
    ("kwj", None),
    ("kwk", None),
    ("kwl", None),
    ("kwm", None),
    ("kwn", None),
    ("kwo", None),
    ("kwp", None),
    ("kwr", None),
    ("kws", None),
    ("kwt", None),
    ("kwu", None),
    ("kwv", None),
    ("kww", None),
    ("kwx", None),
    ("kwy", None),
    ("kwz", None),
    ("kxa", None),
    ("kxb", None),
    ("kxc", None),
    ("kxd", None),
    ("kxf", None),
    ("kxh", None),
    ("kxi", None),
    ("kxj", None),
    ("kxk", None),
    ("kxm", None),
    ("kxn", None),
    ("kxo", None),
    ("kxp", None),
    ("kxq", None),
    ("kxr", None),
    ("kxs", None),
    ("kxt", None),
    ("kxv", None),
    ("kxw", None),
    ("kxx", None),
    ("kxy", None),
    ("kxz", None),
    ("kya", None),
    ("kyb", None),
    ("kyc", None),
    ("kyd", None),
    ("kye", None),
    ("kyf", None),
    ("kyg", None),
    ("kyh", None),
    ("kyi", None),
    ("kyj", None),
    ("kyk", None),
    ("kyl", None),
    ("kym", None),
    ("kyn", None),
    ("kyo", None),
    ("kyp", None),
    ("kyq", None),
    ("kyr", None),
    ("kys", None),
    ("kyt", None),
    ("kyu", None),
    ("kyv", None),
    ("kyw", None),
    ("kyx", None),
    ("kyy", None),
    ("kyz", None),
    ("kza", None),
    ("kzb", None),
    ("kzc", None),
    ("kzd", None),
    ("kze", None),
    ("kzf", None),
    ("kzg", None),
    ("kzi", None),
    ("kzk", None),
    ("kzl", None),
    ("kzm", None),
    ("kzn", None),
    ("kzo", None),
    ("kzp", None),
    ("kzq", None),
    ("kzr", None),
    ("kzs", None),
    ("kzu", None),
    ("kzv", None),
    ("kzw", None),
    ("kzx", None),
    ("kzy", None),
    ("kzz", None),
    ("laa", None),
    ("lab", None),
    ("lac", None),
    ("lad", None),
    ("lae", None),
    ("laf", None),
    ("lag", None),
    ("lah", None),
    ("lai", None),
    ("laj", None),
    ("lal", None),
    ("lam", None),
    ("lan", None),
    ("lao", "lo"),
    ("lap", None),
    ("laq", None),
    ("lar", None),
    ("las", None),
    ("lat", "la"),
    ("lau", None),
    ("lav", "lv"),
    ("law", None),
    ("lax", None),
    ("lay", None),
    ("laz", None),
    ("lbb", None),
    ("lbc", None),
    ("lbe", None),
    ("lbf", None),
    ("lbg", None),
    ("lbi", None),
    ("lbj", None),
    ("lbk", None),
    ("lbl", None),
    ("lbm", None),
    ("lbn", None),
    ("lbo", None),
    ("lbq", None),
    ("lbr", None),
    ("lbs", None),
    ("lbt", None),
    ("lbu", None),
    ("lbv", None),
    ("lbw", None),
    ("lbx", None),
    ("lby", None),
    ("lbz", None),
    ("lcc", None),
    ("lcd", None),
    ("lce", None),
    ("lcf", None),
    ("lch", None),
    ("lcl", None),
    ("lcm", None),
    ("lcp", None),
    ("lcq", None),
    ("lcs", None),
    ("lda", None),
    ("ldb", None),
    ("ldd", None),
    ("ldg", None),
    ("ldh", None),
    ("ldi", None),
    ("ldj", None),
    ("ldk", None),
    ("ldl", None),
    ("ldm", None),
    ("ldn", None),
    ("ldo", None),
    ("ldp", None),
    ("ldq", None),
    ("lea", None),
    ("leb", None),
    ("lec", None),
    ("led", None),
    ("lee", None),
    ("lef", None),
    ("leh", None),
    ("lei", None),
    ("lej", None),
    ("lek", None),
    ("lel", None),
    ("lem", None),
    ("len", None),
    ("leo", None),
    ("lep", None),
    ("leq", None),
    ("ler", None),
    ("les", None),
    ("let", None),
    ("leu", None),
    ("lev", None),
    ("lew", None),
    ("lex", None),
    ("ley", None),
    ("lez", None),
    ("lfa", None),
    ("lfn", None),
    ("lga", None),
    ("lgb", None),
    ("lgg", None),
    ("lgh", None),
    ("lgi", None),
    ("lgk", None),
    ("lgl", None),
    ("lgm", None),
    ("lgn", None),
    ("lgo", None),
    ("lgq", None),
    ("lgr", None),
    ("lgt", None),
    ("lgu", None),
    ("lgz", None),
    ("lha", None),
    ("lhh", None),
    ("lhi", None),
    ("lhl", None),
    ("lhm", None),
    ("lhn", None),
    ("lhp", None),
    ("lhs", None),
    ("lht", None),
    ("lhu", None),
    ("lia", None),
    ("lib", None),
    ("lic", None),
    ("lid", None),
    ("lie", None),
    ("lif", None),
    ("lig", None),
    ("lih", None),
    ("lij", None),
    ("lik", None),
    ("lil", None),
    ("lim", "li"),
    ("lin", "ln"),
    ("lio", None),
    ("lip", None),
    ("liq", None),
    ("lir", None),
    ("lis", None),
    ("lit", "lt"),
    ("liu", None),
    ("liv", None),
    ("liw", None),
    ("lix", None),
    ("liy", None),
    ("liz", None),
    ("lja", None),
    ("lje", None),
    ("lji", None),
    ("ljl", None),
    ("ljp", None),
    ("ljw", None),
    ("ljx", None),
    ("lka", None),
    ("lkb", None),
    ("lkc", None),
    ("lkd", None),
    ("lke", None),
    ("lkh", None),
    ("lki", None),
    ("lkj", None),
    ("lkl", None),
    ("lkm", None),
    ("lkn", None),
    ("lko", None),
    ("lkr", None),
    ("lks", None),
    ("lkt", None),
    ("lku", None),
    ("lky", None),
    ("lla", None),
    ("llb", None),
    ("llc", None),
    ("lld", None),
    ("lle", None),
    ("llf", None),
    ("llg", None),
    ("llh", None),
    ("lli", None),
    ("llj", None),
    ("llk", None),
    ("lll", None),
    ("llm", None),
    ("lln", None),
    ("llp", None),
    ("llq", None),
    ("lls", None),
    ("llu", None),
    ("llx", None),
    ("lma", None),
    ("lmb", None),
    ("lmc", None),
    ("lmd", None),
    ("lme", None),
    ("lmf", None),
    ("lmg", None),
    ("lmh", None),
    ("lmi", None),
    ("lmj", None),
    ("lmk", None),
    ("lml", None),
    ("lmn", None),
    ("lmo", None),
    ("lmp", None),
    ("lmq", None),
    ("lmr", None),
    ("lmu", None),
    ("lmv", None),
    ("lmw", None),
    ("lmx", None),
    ("lmy", None),
    ("lna", None),
    ("lnb", None),
    ("lnd", None),
    ("lng", None),
    ("lnh", None),
    ("lni", None),
    ("lnj", None),
    ("lnl", None),
    ("lnm", None),
    ("lnn", None),
    ("lns", None),
    ("lnu", None),
    ("lnw", None),
    ("lnz", None),
    ("loa", None),
    ("lob", None),
    ("loc", None),
    ("loe", None),
    ("lof", None),
    ("log", None),
    ("loh", None),
    ("loi", None),
    ("loj", None),
    ("lok", None),
    ("lol", None),
    ("lom", None),
    ("lon", None),
    ("loo", None),
    ("lop", None),
    ("loq", None),
    ("lor", None),
    ("los", None),
    ("lot", None),
    ("lou", None),
    ("lov", None),
    ("low", None),
    ("lox", None),
    ("loy", None),
    ("loz", None),
    ("lpa", None),
    ("lpe", None),
    ("lpn", None),
    ("lpo", None),
    ("lpx", None),
    ("lqr", None),
    ("lra", None),
    ("lrc", None),
    ("lre", None),
    ("lrg", None),
    ("lri", None),
    ("lrk", None),
    ("lrl", None),
    ("lrm", None),
    ("lrn", None),
    ("lro", None),
    ("lrr", None),
    ("lrt", None),
    ("lrv", None),
    ("lrz", None),
    ("lsa", None),
    ("lsb", None),
    ("lsc", None),
    ("lsd", None),
    ("lse", None),
    ("lsh", None),
    ("lsi", None),
    ("lsl", None),
    ("lsm", None),
    ("lsn", None),
    ("lso", None),
    ("lsp", None),
    ("lsr", None),
    ("lss", None),
    ("lst", None),
    ("lsv", None),
    ("lsw", None),
    ("lsy", None),
    ("ltc", None),
    ("ltg", None),
    ("lth", None),
    ("lti", None),
    ("ltn", None),
    ("lto", None),
    ("lts", None),
    ("ltu", None),
    ("ltz", "lb"),
    ("lua", None),
    ("lub", "lu"),
    ("luc", None),
    ("lud", None),
    ("lue", None),
    ("luf", None),
    ("lug", "lg"),
    ("lui", None),
    ("luj", None),
    ("luk", None),
    ("lul", None),
    ("lum", None),
    ("lun", None),
    ("luo", None),
    ("lup", None),
    ("luq", None),
    ("lur", None),
    ("lus", None),
    ("lut", None),
    ("luu", None),
    ("luv", None),
    ("luw", None),
    ("luy", None),
    ("luz", None),
    ("lva", None),
    ("lvi", None),
    ("lvk", None),
    ("lvs", None),
    ("lvu", None),
    ("lwa", None),
    ("lwe", None),
    ("lwg", None),
    ("lwh", None),
    ("lwl", None),
    ("lwm", None),
    ("lwo", None),
    ("lws", None),
    ("lwt", None),
    ("lwu", None),
    ("lww", None),
    ("lxm", None),
    ("lya", None),
    ("lyg", None),
    ("lyn", None),
    ("lzh", None),
    ("lzl", None),
    ("lzn", None),
    ("lzz", None),
    ("maa", None),
    ("mab", None),
    ("mad", None),
    ("mae", None),
    ("maf", None),
    ("mag", None),
    ("mah", "mh"),
    ("mai", None),
    ("maj", None),
    ("mak", None),
    ("mal", "ml"),
    ("mam", None),
    ("man", None),
    ("maq", None),
    ("mar", "mr"),
    ("mas", None),
    ("mat", None),
    ("mau", None),
    ("mav", None),
    ("maw", None),
    ("max", None),
    ("maz", None),
    ("mba", None),
    ("mbb", None),
    ("mbc", None),
    ("mbd", None),
    ("mbe", None),
    ("mbf", None),
    ("mbh", None),
    ("mbi", None),
    ("mbj", None),
    ("mbk", None),
    ("mbl", None),
    ("mbm", None),
    ("mbn", None),
    ("mbo", None),
    ("mbp", None),
    ("mbq", None),
    ("mbr", None),
    ("mbs", None),
    ("mbt", None),
    ("mbu", None),
    ("mbv", None),
    ("mbw", None),
    ("mbx", None),
    ("mby", None),
    ("mbz", None),
    ("mca", None),
    ("mcb", None),
    ("mcc", None),
    ("mcd", None),
    ("mce", None),
    ("mcf", None),
    ("mcg", None),
    ("mch", None),
    ("mci", None),
    ("mcj", None),
    ("mck", None),
    ("mcl", None),
    ("mcm", None),
    ("mcn", None),
    ("mco", None),
    ("mcp", None),
    ("mcq", None),
    ("mcr", None),
    ("mcs", None),
    ("mct", None),
    ("mcu", None),
    ("mcv", None),
    ("mcw", None),
    ("mcx", None),
    ("mcy", None),
    ("mcz", None),
    ("mda", None),
    ("mdb", None),
    ("mdc", None),
    ("mdd", None),
    ("mde", None),
    ("mdf", None),
    ("mdg", None),
    ("mdh", None),
    ("mdi", None),
    ("mdj", None),
    ("mdk", None),
    ("mdl", None),
    ("mdm", None),
    ("mdn", None),
    ("mdp", None),
    ("mdq", None),
    ("mdr", None),
    ("mds", None),
    ("mdt", None),
    ("mdu", None),
    ("mdv", None),
    ("mdw", None),
    ("mdx", None),
    ("mdy", None),
    ("mdz", None),
    ("mea", None),
    ("meb", None),
    ("mec", None),
    ("med", None),
    ("mee", None),
    ("mef", None),
    ("meh", None),
    ("mei", None),
    ("mej", None),
    ("mek", None),
    ("mel", None),
    ("mem", None),
    ("men", None),
    ("meo", None),
    ("mep", None),
    ("meq", None),
    ("mer", None),
    ("mes", None),
    ("met", None),
    ("meu", None),
    ("mev", None),
    ("mew", None),
    ("mey", None),
    ("mez", None),
    ("mfa", None),
    ("mfb", None),
    ("mfc", None),
    ("mfd", None),
    ("mfe", None),
    ("mff", None),
    ("mfg", None),
    ("mfh", None),
    ("mfi", None),
    ("mfj", None),
    ("mfk", None),
    ("mfl", None),
    ("mfm", None),
    ("mfn", None),
    ("mfo", None),
    ("mfp", None),
    ("mfq", None),
    ("mfr", None),
    ("mfs", None),
    ("mft", None),
    ("mfu", None),
    ("mfv", None),
    ("mfw", None),
    ("mfx", None),
    ("mfy", None),
    ("mfz", None),
    ("mga", None),
    ("mgb", None),
    ("mgc", None),
    ("mgd", None),
    ("mge", None),
    ("mgf", None),
    ("mgg", None),
    ("mgh", None),
    ("mgi", None),
    ("mgj", None),
    ("mgk", None),
    ("mgl", None),
    ("mgm", None),
    ("mgn", None),
    ("mgo", None),
    ("mgp", None),
    ("mgq", None),
    ("mgr", None),
    ("mgs", None),
    ("mgt", None),
    ("mgu", None),
    ("mgv", None),
    ("mgw", None),
    ("mgy", None),
    ("mgz", None),
    ("mha", None),
    ("mhb", None),
    ("mhc", None),
    ("mhd", None),
    ("mhe", None),
    ("mhf", None),
    ("mhg", None),
    ("mhi", None),
    ("mhj", None),
    ("mhk", None),
    ("mhl", None),
    ("mhm", None),
    ("mhn", None),
    ("mho", None),
    ("mhp", None),
    ("mhq", None),
    ("mhr", None),
    ("mhs", None),
    ("mht", None),
    ("mhu", None),
    ("mhw", None),
    ("mhx", None),
    ("mhy", None),
    ("mhz", None),
    ("mia", None),
    ("mib", None),
    ("mic", None),
    ("mid", None),
    ("mie", None),
    ("mif", None),
    ("mig", None),
    ("mih", None),
    ("mii", None),
    ("mij", None),
    ("mik", None),
    ("mil", None),
    ("mim", None),
    ("min", None),
    ("mio", None),
    ("mip", None),
    ("miq", None),
    ("mir", None),
    ("mis", None),
    ("mit", None),
    ("miu", None),
    ("miw", None),
    ("mix", None),
    ("miy", None),
    ("miz", None),
    ("mjb", None),
    ("mjc", None),
    ("mjd", None),
    ("mje", None),
    ("mjg", None),
    ("mjh", None),
    ("mji", None),
    ("mjj", None),
    ("mjk", None),
    ("mjl", None),
    ("mjm", None),
    ("mjn", None),
    ("mjo", None),
    ("mjp", None),
    ("mjq", None),
    ("mjr", None),
    ("mjs", None),
    ("mjt", None),
    ("mju", None),
    ("mjv", None),
    ("mjw", None),
    ("mjx", None),
    ("mjy", None),
    ("mjz", None),
    ("mka", None),
    ("mkb", None),
    ("mkc", None),
    ("mkd", "mk"),
    ("mke", None),
    ("mkf", None),
    ("mkg", None),
    ("mki", None),
    ("mkj", None),
    ("mkk", None),
    ("mkl", None),
    ("mkm", None),
    ("mkn", None),
    ("mko", None),
    ("mkp", None),
    ("mkq", None),
    ("mkr", None),
    ("mks", None),
    ("mkt", None),
    ("mku", None),
    ("mkv", None),
    ("mkw", None),
    ("mkx", None),
    ("mky", None),
    ("mkz", None),
    ("mla", None),
    ("mlb", None),
    ("mlc", None),
    ("mle", None),
    ("mlf", None),
    ("mlg", "mg"),
    ("mlh", None),
    ("mli", None),
    ("mlj", None),
    ("mlk", None),
    ("mll", None),
    ("mlm", None),
    ("mln", None),
    ("mlo", None),
    ("mlp", None),
    ("mlq", None),
    ("mlr", None),
    ("mls", None),
    ("mlt", "mt"),
    ("mlu", None),
    ("mlv", None),
    ("mlw", None),
    ("mlx", None),
    ("mlz", None),
    ("mma", None),
    ("mmb", None),
    ("mmc", None),
    ("mmd", None),
    ("mme", None),
    ("mmf", None),
    ("mmg", None),
    ("mmh", None),
    ("mmi", None),
    ("mmj", None),
    ("mmk", None),
    ("mml", None),
    ("mmm", None),
    ("mmn", None),
    ("mmo", None),
    ("mmp", None),
    ("mmq", None),
    ("mmr", None),
    ("mmt", None),
    ("mmu", None),
    ("mmv", None),
    ("mmw", None),
    ("mmx", None),
    ("mmy", None),
    ("mmz", None),
    ("mna", None),
    ("mnb", None),
    ("mnc", None),
    ("mnd", None),
    ("mne", None),
    ("mnf", None),
    ("mng", None),
    ("mnh", None),
    ("mni", None),
    ("mnj", None),
    ("mnk", None),
    ("mnl", None),
    ("mnm", None),
    ("mnn", None),
    ("mnp", None),
    ("mnq", None),
    ("mnr", None),
    ("mns", None),
    ("mnu", None),
    ("mnv", None),
    ("mnw", None),
    ("mnx", None),
    ("mny", None),
    ("mnz", None),
    ("moa", None),
    ("moc", None),
    ("mod", None),
    ("moe", None),
    ("mog", None),
    ("moh", None),
    ("moi", None),
    ("moj", None),
    ("mok", None),
    ("mom", None),
    ("mon", "mn"),
    ("moo", None),
    ("mop", None),
    ("moq", None),
    ("mor", None),
    ("mos", None),
    ("mot", None),
    ("mou", None),
    ("mov", None),
    ("mow", None),
    ("mox", None),
    ("moy", None),
    ("moz", None),
    ("mpa", None),
    ("mpb", None),
    ("mpc", None),
    ("mpd", None),
    ("mpe", None),
    ("mpg", None),
    ("mph", None),
    ("mpi", None),
    ("mpj", None),
    ("mpk", None),
    ("mpl", None),
    ("mpm", None),
    ("mpn", None),
    ("mpo", None),
    ("mpp", None),
    ("mpq", None),
    ("mpr", None),
    ("mps", None),
    ("mpt", None),
    ("mpu", None),
    ("mpv", None),
    ("mpw", None),
    ("mpx", None),
    ("mpy", None),
    ("mpz", None),
    ("mqa", None),
    ("mqb", None),
    ("mqc", None),
    ("mqe", None),
    ("mqf", None),
    ("mqg", None),
    ("mqh", None),
    ("mqi", None),
    ("mqj", None),
    ("mqk", None),
    ("mql", None),
    ("mqm", None),
    ("mqn", None),
    ("mqo", None),
    ("mqp", None),
    ("mqq", None),
    ("mqr", None),
    ("mqs", None),
    ("mqt", None),
    ("mqu", None),
    ("mqv", None),
    ("mqw", None),
    ("mqx", None),
    ("mqy", None),
    ("mqz", None),
    ("mra", None),
    ("mrb", None),
    ("mrc", None),
    ("mrd", None),
    ("mre", None),
    ("mrf", None),
    ("mrg", None),
    ("mrh", None),
    ("mri", "mi"),
    ("mrj", None),
    ("mrk", None),
    ("mrl", None),
    ("mrm", None),
    ("mrn", None),
    ("mro", None),
    ("mrp", None),
    ("mrq", None),
    ("mrr", None),
    ("mrs", None),
    ("mrt", None),
    ("mru", None),
    ("mrv", None),
    ("mrw", None),
    ("mrx", None),
    ("mry", None),
    ("mrz", None),
    ("msa", "ms"),
    ("msb", None),
    ("msc", None),
    ("msd", None),
    ("mse", None),
    ("msf", None),
    ("msg", None),
    ("msh", None),
    ("msi", None),
    ("msj", None),
    ("msk", None),
    ("msl", None),
    ("msm", None),
    ("msn", None),
    ("mso", None),
    ("msp", None),
    ("msq", None),
    ("msr", None),
    ("mss", None),
    ("msu", None),
    ("msv", None),
    ("msw", None),
    ("msx", None),
    ("msy", None),
    ("msz", None),
    ("mta", None),
    ("mtb", None),
    ("mtc", None),
    ("mtd", None),
    ("mte", None),
    ("mtf", None),
    ("mtg", None),
    ("mth", None),
    ("mti", None),
    ("mtj", None),
    ("mtk", None),
    ("mtl", None),
    ("mtm", None),
    ("mtn", None),
    ("mto", None),
    ("mtp", None),
    ("mtq", None),
    ("mtr", None),
    ("mts", None),
    ("mtt", None),
    ("mtu", None),
    ("mtv", None),
    ("mtw", None),
    ("mtx", None),
    ("mty", None),
    ("mua", None),
    ("mub", None),
    ("muc", None),
    ("mud", None),
    ("mue", None),
    ("mug", None),
    ("muh", None),
    ("mui", None),
    ("muj", None),
    ("muk", None),
    ("mul", None),
    ("mum", None),
    ("muo", None),
    ("mup", None),
    ("muq", None),
    ("mur", None),
    ("mus", None),
    ("mut", None),
    ("muu", None),
    ("muv", None),
    ("mux", None),
    ("muy", None),
    ("muz", None),
    ("mva", None),
    ("mvb", None),
    ("mvd", None),
    ("mve", None),
    ("mvf", None),
    ("mvg", None),
    ("mvh", None),
    ("mvi", None),
    ("mvk", None),
    ("mvl", None),
    ("mvn", None),
    ("mvo", None),
    ("mvp", None),
    ("mvq", None),
    ("mvr", None),
    ("mvs", None),
    ("mvt", None),
    ("mvu", None),
    ("mvv", None),
    ("mvw", None),
    ("mvx", None),
    ("mvy", None),
    ("mvz", None),
    ("mwa", None),
    ("mwb", None),
    ("mwc", None),
    ("mwe", None),
    ("mwf", None),
    ("mwg", None),
    ("mwh", None),
    ("mwi", None),
    ("mwk", None),
    ("mwl", None),
    ("mwm", None),
    ("mwn", None),
    ("mwo", None),
    ("mwp", None),
    ("mwq", None),
    ("mwr", None),
    ("mws", None),
    ("mwt", None),
    ("mwu", None),
    ("mwv", None),
    ("mww", None),
    ("mwz", None),
    ("mxa", None),
    ("mxb", None),
    ("mxc", None),
    ("mxd", None),
    ("mxe", None),
    ("mxf", None),
    ("mxg", None),
    ("mxh", None),
    ("mxi", None),
    ("mxj", None),
    ("mxk", None),
    ("mxl", None),
    ("mxm", None),
    ("mxn", None),
    ("mxo", None),
    ("mxp", None),
    ("mxq", None),
    ("mxr", None),
    ("mxs", None),
    ("mxt", None),
    ("mxu", None),
    ("mxv", None),
    ("mxw", None),
    ("mxx", None),
    ("mxy", None),
    ("mxz", None),
    ("mya", "my"),
    ("myb", None),
    ("myc", None),
    ("mye", None),
    ("myf", None),
    ("myg", None),
    ("myh", None),
    ("myj", None),
    ("myk", None),
    ("myl", None),
    ("mym", None),
    ("myo", None),
    ("myp", None),
    ("myr", None),
    ("mys", None),
    ("myu", None),
    ("myv", None),
    ("myw", None),
    ("myx", None),
    ("myy", None),
    ("myz", None),
    ("mza", None),
    ("mzb", None),
    ("mzc", None),
    ("mzd", None),
    ("mze", None),
    ("mzg", None),
    ("mzh", None),
    ("mzi", None),
    ("mzj", None),
    ("mzk", None),
    ("mzl", None),
    ("mzm", None),
    ("mzn", None),
    ("mzo", None),
    ("mzp", None),
    ("mzq", None),
    ("mzr", None),
    ("mzs", None),
    ("mzt", None),
    ("mzu", None),
    ("mzv", None),
    ("mzw", None),
    ("mzx", None),
    ("mzy", None),
    ("mzz", None),
    ("naa", None),
    ("nab", None),
    ("nac", None),
    ("nae", None),
    ("naf", None),
    ("nag", None),
    ("naj", None),
    ("nak", None),
    ("nal", None),
    ("nam", None),
    ("nan", None),
    ("nao", None),
    ("nap", None),
    ("naq", None),
    ("nar", None),
    ("nas", None),
    ("nat", None),
    ("nau", "na"),
    ("nav", "nv"),
    ("naw", None),
    ("nax", None),
    ("nay", None),
    ("naz", None),
    ("nba", None),
    ("nbb", None),
    ("nbc", None),
    ("nbd", None),
    ("nbe", None),
    ("nbg", None),
    ("nbh", None),
    ("nbi", None),
    ("nbj", None),
    ("nbk", None),
    ("nbl", "nr"),
    ("nbm", None),
    ("nbn", None),
    ("nbo", None),
    ("nbp", None),
    ("nbq", None),
    ("nbr", None),
    ("nbs", None),
    ("nbt", None),
    ("nbu", None),
    ("nbv", None),
    ("nbw", None),
    ("nby", None),
    ("nca", None),
    ("ncb", None),
    ("ncc", None),
    ("ncd", None),
    ("nce", None),
    ("ncf", None),
    ("ncg", None),
    ("nch", None),
    ("nci", None),
    ("ncj", None),
    ("nck", None),
    ("ncl", None),
    ("ncm", None),
    ("ncn", None),
    ("nco", None),
    ("ncq", None),
    ("ncr", None),
    ("ncs", None),
    ("nct", None),
    ("ncu", None),
    ("ncx", None),
    ("ncz", None),
    ("nda", None),
    ("ndb", None),
    ("ndc", None),
    ("ndd", None),
    ("nde", "nd"),
    ("ndf", None),
    ("ndg", None),
    ("ndh", None),
    ("ndi", None),
    ("ndj", None),
    ("ndk", None),
    ("ndl", None),
    ("ndm", None),
    ("ndn", None),
    ("ndo", "ng"),
    ("ndp", None),
    ("ndq", None),
    ("ndr", None),
    ("nds", None),
    ("ndt", None),
    ("ndu", None),
    ("ndv", None),
    ("ndw", None),
    ("ndx", None),
    ("ndy", None),
    ("ndz", None),
    ("nea", None),
    ("neb", None),
    ("nec", None),
    ("ned", None),
    ("nee", None),
    ("nef", None),
    ("neg", None),
    ("neh", None),
    ("nei", None),
    ("nej", None),
    ("nek", None),
    ("nem", None),
    ("nen", None),
    ("neo", None),
    ("nep", "ne"),
    ("neq", None),
    ("ner", None),
    ("nes", None),
    ("net", None),
    ("neu", None),
    ("nev", None),
    ("new", None),
    ("nex", None),
    ("ney", None),
    ("nez", None),
    ("nfa", None),
    ("nfd", None),
    ("nfl", None),
    ("nfr", None),
    ("nfu", None),
    ("nga", None),
    ("ngb", None),
    ("ngc", None),
    ("ngd", None),
    ("nge", None),
    ("ngg", None),
    ("ngh", None),
    ("ngi", None),
    ("ngj", None),
    ("ngk", None),
    ("ngl", None),
    ("ngm", None),
    ("ngn", None),
    ("ngp", None),
    ("ngq", None),
    ("ngr", None),
    ("ngs", None),
    ("ngt", None),
    ("ngu", None),
    ("ngv", None),
    ("ngw", None),
    ("ngx", None),
    ("ngy", None),
    ("ngz", None),
    ("nha", None),
    ("nhb", None),
    ("nhc", None),
    ("nhd", None),
    ("nhe", None),
    ("nhf", None),
    ("nhg", None),
    ("nhh", None),
    ("nhi", None),
    ("nhk", None),
    ("nhm", None),
    ("nhn", None),
    ("nho", None),
    ("nhp", None),
    ("nhq", None),
    ("nhr", None),
    ("nht", None),
    ("nhu", None),
    ("nhv", None),
    ("nhw", None),
    ("nhx", None),
    ("nhy", None),
    ("nhz", None),
    ("nia", None),
    ("nib", None),
    ("nid", None),
    ("nie", None),
    ("nif", None),
    ("nig", None),
    ("nih", None),
    ("nii", None),
    ("nij", None),
    ("nik", None),
    ("nil", None),
    ("nim", None),
    ("nin", None),
    ("nio", None),
    ("niq", None),
    ("nir", None),
    ("nis", None),
    ("nit", None),
    ("niu", None),
    ("niv", None),
    ("niw", None),
    ("nix", None),
    ("niy", None),
    ("niz", None),
    ("nja", None),
    ("njb", None),
    ("njd", None),
    ("njh", None),
    ("nji", None),
    ("njj", None),
    ("njl", None),
    ("njm", None),
    ("njn", None),
    ("njo", None),
    ("njr", None),
    ("njs", None),
    ("njt", None),
    ("nju", None),
    ("njx", None),
    ("njy", None),
    ("njz", None),
    ("nka", None),
    ("nkb", None),
    ("nkc", None),
    ("nkd", None),
    ("nke", None),
    ("nkf", None),
    ("nkg", None),
    ("nkh", None),
    ("nki", None),
    ("nkj", None),
    ("nkk", None),
    ("nkm", None),
    ("nkn", None),
    ("nko", None),
    ("nkp", None),
    ("nkq", None),
    ("nkr", None),
    ("nks", None),
    ("nkt", None),
    ("nku", None),
    ("nkv", None),
    ("nkw", None),
    ("nkx", None),
    ("nkz", None),
    ("nla", None),
    ("nlc", None),
    ("nld", "nl"),
    ("nle", None),
    ("nlg", None),
    ("nli", None),
    ("nlj", None),
    ("nlk", None),
    ("nll", None),
    ("nlm", None),
    ("nlo", None),
    ("nlq", None),
    ("nlu", None),
    ("nlv", None),
    ("nlw", None),
    ("nlx", None),
    ("nly", None),
    ("nlz", None),
    ("nma", None),
    ("nmb", None),
    ("nmc", None),
    ("nmd", None),
    ("nme", None),
    ("nmf", None),
    ("nmg", None),
    ("nmh", None),
    ("nmi", None),
    ("nmj", None),
    ("nmk", None),
    ("nml", None),
    ("nmm", None),
    ("nmn", None),
    ("nmo", None),
    ("nmp", None),
    ("nmq", None),
    ("nmr", None),
    ("nms", None),
    ("nmt", None),
    ("nmu", None),
    ("nmv", None),
    ("nmw", None),
    ("nmx", None),
    ("nmy", None),
    ("nmz", None),
    ("nna", None),
    ("nnb", None),
    ("nnc", None),
    ("nnd", None),
    ("nne", None),
    ("nnf", None),
    ("nng", None),
    ("nnh", None),
    ("nni", None),
    ("nnj", None),
    ("nnk", None),
    ("nnl", None),
    ("nnm", None),
    ("nnn", None),
    ("nno", "nn"),
    ("nnp", None),
    ("nnq", None),
    ("nnr", None),
    ("nnt", None),
    ("nnu", None),
    ("nnv", None),
    ("nnw", None),
    ("nny", None),
    ("nnz", None),
    ("noa", None),
    ("nob", "nb"),
    ("noc", None),
    ("nod", None),
    ("noe", None),
    ("nof", None),
    ("nog", None),
    ("noh", None),
    ("noi", None),
    ("noj", None),
    ("nok", None),
    ("nol", None),
    ("nom", None),
    ("non", None),
    ("nop", None),
    ("noq", None),
    ("nor", "no"),
    ("nos", None),
    ("not", None),
    ("nou", None),
    ("nov", None),
    ("now", None),
    ("noy", None),
    ("noz", None),
    ("npa", None),
    ("npb", None),
    ("npg", None),
    ("nph", None),
    ("npi", None),
    ("npl", None),
    ("npn", None),
    ("npo", None),
    ("nps", None),
    ("npu", None),
    ("npx", None),
    ("npy", None),
    ("nqg", None),
    ("nqk", None),
    ("nql", None),
    ("nqm", None),
    ("nqn", None),
    ("nqo", None),
    ("nqq", None),
    ("nqt", None),
    ("nqy", None),
    ("nra", None),
    ("nrb", None),
    ("nrc", None),
    ("nre", None),
    ("nrf", None),
    ("nrg", None),
    ("nri", None),
    ("nrk", None),
    ("nrl", None),
    ("nrm", None),
    ("nrn", None),
    ("nrp", None),
    ("nrr", None),
    ("nrt", None),
    ("nru", None),
    ("nrx", None),
    ("nrz", None),
    ("nsa", None),
    ("nsb", None),
    ("nsc", None),
    ("nsd", None),
    ("nse", None),
    ("nsf", None),
    ("nsg", None),
    ("nsh", None),
    ("nsi", None),
    ("nsk", None),
    ("nsl", None),
    ("nsm", None),
    ("nsn", None),
    ("nso", None),
    ("nsp", None),
    ("nsq", None),
    ("nsr", None),
    ("nss", None),
    ("nst", None),
    ("nsu", None),
    ("nsv", None),
    ("nsw", None),
    ("nsx", None),
    ("nsy", None),
    ("nsz", None),
    ("ntd", None),
    ("nte", None),
    ("ntg", None),
    ("nti", None),
    ("ntj", None),
    ("ntk", None),
    ("ntm", None),
    ("nto", None),
    ("ntp", None),
    ("ntr", None),
    ("ntu", None),
    ("ntw", None),
    ("ntx", None),
    ("nty", None),
    ("ntz", None),
    ("nua", None),
    ("nuc", None),
    ("nud", None),
    ("nue", None),
    ("nuf", None),
    ("nug", None),
    ("nuh", None),
    ("nui", None),
    ("nuj", None),
    ("nuk", None),
    ("nul", None),
    ("num", None),
    ("nun", None),
    ("nuo", None),
    ("nup", None),
    ("nuq", None),
    ("nur", None),
    ("nus", None),
    ("nut", None),
    ("nuu", None),
    ("nuv", None),
    ("nuw", None),
    ("nux", None),
    ("nuy", None),
    ("nuz", None),
    ("nvh", None),
    ("nvm", None),
    ("nvo", None),
    ("nwa", None),
    ("nwb", None),
    ("nwc", None),
    ("nwe", None),
    ("nwg", None),
    ("nwi", None),
    ("nwm", None),
    ("nwo", None),
    ("nwr", None),
    ("nww", None),
    ("nwx", None),
    ("nwy", None),
    ("nxa", None),
    ("nxd", None),
    ("nxe", None),
    ("nxg", None),
    ("nxi", None),
    ("nxk", None),
    ("nxl", None),
    ("nxm", None),
    ("nxn", None),
    ("nxo", None),
    ("nxq", None),
    ("nxr", None),
    ("nxx", None),
    ("nya", "ny"),
    ("nyb", None),
    ("nyc", None),
    ("nyd", None),
    ("nye", None),
    ("nyf", None),
    ("nyg", None),
    ("nyh", None),
    ("nyi", None),
    ("nyj", None),
    ("nyk", None),
    ("nyl", None),
    ("nym", None),
    ("nyn", None),
    ("nyo", None),
    ("nyp", None),
    ("nyq", None),
    ("nyr", None),
    ("nys", None),
    ("nyt", None),
    ("nyu", None),
    ("nyv", None),
    ("nyw", None),
    ("nyx", None),
    ("nyy", None),
    ("nza", None),
    ("nzb", None),
    ("nzd", None),
    ("nzi", None),
    ("nzk", None),
    ("nzm", None),
    ("nzs", None),
    ("nzu", None),
    ("nzy", None),
    ("nzz", None),
    ("oaa", None),
    ("oac", None),
    ("oar", None),
    ("oav", None),
    ("obi", None),
    ("obk", None),
    ("obl", None),
    ("obm", None),
    ("obo", None),
    ("obr", None),
    ("obt", None),
    ("obu", None),
    ("oca", None),
    ("och", None),
    ("oci", "oc"),
    ("ocm", None),
    ("oco", None),
    ("ocu", None),
    ("oda", None),
    ("odk", None),
    ("odt", None),
    ("odu", None),
    ("ofo", None),
    ("ofs", None),
    ("ofu", None),
    ("ogb", None),
    ("ogc", None),
    ("oge", None),
    ("ogg", None),
    ("ogo", None),
    ("ogu", None),
    ("oht", None),
    ("ohu", None),
    ("oia", None),
    ("oie", None),
    ("oin", None),
    ("ojb", None),
    ("ojc", None),
    ("ojg", None),
    ("oji", "oj"),
    ("ojp", None),
    ("ojs", None),
    ("ojv", None),
    ("ojw", None),
    ("oka", None),
    ("okb", None),
    ("okc", None),
    ("okd", None),
    ("oke", None),
    ("okg", None),
    ("okh", None),
    ("oki", None),
    ("okj", None),
    ("okk", None),
    ("okl", None),
    ("okm", None),
    ("okn", None),
    ("oko", None),
    ("okr", None),
    ("oks", None),
    ("oku", None),
    ("okv", None),
    ("okx", None),
    ("okz", None),
    ("ola", None),
    ("old", None),
    ("ole", None),
    ("olk", None),
    ("olm", None),
    ("olo", None),
    ("olr", None),
    ("olt", None),
    ("olu", None),
    ("oma", None),
    ("omb", None),
    ("omc", None),
    ("omg", None),
    ("omi", None),
    ("omk", None),
    ("oml", None),
    ("omn", None),
    ("omo", None),
    ("omp", None),
    ("omr", None),
    ("omt", None),
    ("omu", None),
    ("omw", None),
    ("omx", None),
    ("omy", None),
    ("ona", None),
    ("onb", None),
    ("one", None),
    ("ong", None),
    ("oni", None),
    ("onj", None),
    ("onk", None),
    ("onn", None),
    ("ono", None),
    ("onp", None),
    ("onr", None),
    ("ons", None),
    ("ont", None),
    ("onu", None),
    ("onw", None),
    ("onx", None),
    ("ood", None),
    ("oog", None),
    ("oon", None),
    ("oor", None),
    ("oos", None),
    ("opa", None),
    ("opk", None),
    ("opm", None),
    ("opo", None),
    ("opt", None),
    ("opy", None),
    ("ora", None),
    ("orc", None),
    ("ore", None),
    ("org", None),
    ("orh", None),
    ("ori", "or"),
    ("orm", "om"),
    ("orn", None),
    ("oro", None),
    ("orr", None),
    ("ors", None),
    ("ort", None),
    ("oru", None),
    ("orv", None),
    ("orw", None),
    ("orx", None),
    ("ory", None),
    ("orz", None),
    ("osa", None),
    ("osc", None),
    ("osi", None),
    ("osn", None),
    ("oso", None),
    ("osp", None),
    ("oss", "os"),
    ("ost", None),
    ("osu", None),
    ("osx", None),
    ("ota", None),
    ("otb", None),
    ("otd", None),
    ("ote", None),
    ("oti", None),
    ("otk", None),
    ("otl", None),
    ("otm", None),
    ("otn", None),
    ("otq", None),
    ("otr", None),
    ("ots", None),
    ("ott", None),
    ("otu", None),
    ("otw", None),
    ("otx", None),
    ("oty", None),
    ("otz", None),
    ("oua", None),
    ("oub", None),
    ("oue", None),
    ("oui", None),
    ("oum", None),
    ("ovd", None),
    ("owi", None),
    ("owl", None),
    ("oyb", None),
    ("oyd", None),
    ("oym", None),
    ("oyy", None),
    ("ozm", None),
    ("pab", None),
    ("pac", None),
    ("pad", None),
    ("pae", None),
    ("paf", None),
    ("pag", None),
    ("pah", None),
    ("pai", None),
    ("pak", None),
    ("pal", None),
    ("pam", None),
    ("pan", "pa"),
    ("pao", None),
    ("pap", None),
    ("paq", None),
    ("par", None),
    ("pas", None),
    ("pau", None),
    ("pav", None),
    ("paw", None),
    ("pax", None),
    ("pay", None),
    ("paz", None),
    ("pbb", None),
    ("pbc", None),
    ("pbe", None),
    ("pbf", None),
    ("pbg", None),
    ("pbh", None),
    ("pbi", None),
    ("pbl", None),
    ("pbm", None),
    ("pbn", None),
    ("pbo", None),
    ("pbp", None),
    ("pbr", None),
    ("pbs", None),
    ("pbt", None),
    ("pbu", None),
    ("pbv", None),
    ("pby", None),
    ("pca", None),
    ("pcb", None),
    ("pcc", None),
    ("pcd", None),
    ("pce", None),
    ("pcf", None),
    ("pcg", None),
    ("pch", None),
    ("pci", None),
    ("pcj", None),
    ("pck", None),
    ("pcl", None),
    ("pcm", None),
    ("pcn", None),
    ("pcp", None),
    ("pcw", None),
    ("pda", None),
    ("pdc", None),
    ("pdi", None),
    ("pdn", None),
    ("pdo", None),
    ("pdt", None),
    ("pdu", None),
    ("pea", None),
    ("peb", None),
    ("ped", None),
    ("pee", None),
    ("pef", None),
    ("peg", None),
    ("peh", None),
    ("pei", None),
    ("pej", None),
    ("pek", None),
    ("pel", None),
    ("pem", None),
    ("peo", None),
    ("pep", None),
    ("peq", None),
    ("pes", None),
    ("pev", None),
    ("pex", None),
    ("pey", None),
    ("pez", None),
    ("pfa", None),
    ("pfe", None),
    ("pfl", None),
    ("pga", None),
    ("pgd", None),
    ("pgg", None),
    ("pgi", None),
    ("pgk", None),
    ("pgl", None),
    ("pgn", None),
    ("pgs", None),
    ("pgu", None),
    ("pgz", None),
    ("pha", None),
    ("phd", None),
    ("phg", None),
    ("phh", None),
    ("phj", None),
    ("phk", None),
    ("phl", None),
    ("phm", None),
    ("phn", None),
    ("pho", None),
    ("phq", None),
    ("phr", None),
    ("pht", None),
    ("phu", None),
    ("phv", None),
    ("phw", None),
    ("pia", None),
    ("pib", None),
    ("pic", None),
    ("pid", None),
    ("pie", None),
    ("pif", None),
    ("pig", None),
    ("pih", None),
    ("pij", None),
    ("pil", None),
    ("pim", None),
    ("pin", None),
    ("pio", None),
    ("pip", None),
    ("pir", None),
    ("pis", None),
    ("pit", None),
    ("piu", None),
    ("piv", None),
    ("piw", None),
    ("pix", None),
    ("piy", None),
    ("piz", None),
    ("pjt", None),
    ("pka", None),
    ("pkb", None),
    ("pkc", None),
    ("pkg", None),
    ("pkh", None),
    ("pkn", None),
    ("pko", None),
    ("pkp", None),
    ("pkr", None),
    ("pks", None),
    ("pkt", None),
    ("pku", None),
    ("pla", None),
    ("plb", None),
    ("plc", None),
    ("pld", None),
    ("ple", None),
    ("plg", None),
    ("plh", None),
    ("pli", "pi"),
    ("plj", None),
    ("plk", None),
    ("pll", None),
    ("pln", None),
    ("plo", None),
    ("plq", None),
    ("plr", None),
    ("pls", None),
    ("plt", None),
    ("plu", None),
    ("plv", None),
    ("plw", None),
    ("ply", None),
    ("plz", None),
    ("pma", None),
    ("pmb", None),
    ("pmd", None),
    ("pme", None),
    ("pmf", None),
    ("pmh", None),
    ("pmi", None),
    ("pmj", None),
    ("pmk", None),
    ("pml", None),
    ("pmm", None),
    ("pmn", None),
    ("pmo", None),
    ("pmq", None),
    ("pmr", None),
    ("pms", None),
    ("pmt", None),
    ("pmw", None),
    ("pmx", None),
    ("pmy", None),
    ("pmz", None),
    ("pna", None),
    ("pnb", None),
    ("pnc", None),
    ("pnd", None),
    ("pne", None),
    ("png", None),
    ("pnh", None),
    ("pni", None),
    ("pnj", None),
    ("pnk", None),
    ("pnl", None),
    ("pnm", None),
    ("pnn", None),
    ("pno", None),
    ("pnp", None),
    ("pnq", None),
    ("pnr", None),
    ("pns", None),
    ("pnt", None),
    ("pnu", None),
    ("pnv", None),
    ("pnw", None),
    ("pnx", None),
    ("pny", None),
    ("pnz", None),
    ("poc", None),
    ("poe", None),
    ("pof", None),
    ("pog", None),
    ("poh", None),
    ("poi", None),
    ("pok", None),
    ("pol", "pl"),
    ("pom", None),
    ("pon", None),
    ("poo", None),
    ("pop", None),
    ("poq", None),
    ("por", "pt"),
    ("pos", None),
    ("pot", None),
    ("pov", None),
    ("pow", None),
    ("pox", None),
    ("poy", None),
    ("ppe", None),
    ("ppi", None),
    ("ppk", None),
    ("ppl", None),
    ("ppm", None),
    ("ppn", None),
    ("ppo", None),
    ("ppp", None),
    ("ppq", None),
    ("pps", None),
    ("ppt", None),
    ("ppu", None),
    ("pqa", None),
    ("pqm", None),
    ("prc", None),
    ("prd", None),
    ("pre", None),
    ("prf", None),
    ("prg", None),
    ("prh", None),
    ("pri", None),
    ("prk", None),
    ("prl", None),
    ("prm", None),
    ("prn", None),
    ("pro", None),
    ("prp", None),
    ("prq", None),
    ("prr", None),
    ("prs", None),
    ("prt", None),
    ("pru", None),
    ("prw", None),
    ("prx", None),
    ("prz", None),
    ("psa", None),
    ("psc", None),
    ("psd", None),
    ("pse", None),
    ("psg", None),
    ("psh", None),
    ("psi", None),
    ("psl", None),
    ("psm", None),
    ("psn", None),
    ("pso", None),
    ("psp", None),
    ("psq", None),
    ("psr", None),
    ("pss", None),
    ("pst", None),
    ("psu", None),
    ("psw", None),
    ("psy", None),
    ("pta", None),
    ("pth", None),
    ("pti", None),
    ("ptn", None),
    ("pto", None),
    ("ptp", None),
    ("ptq", None),
    ("ptr", None),
    ("ptt", None),
    ("ptu", None),
    ("ptv", None),
    ("ptw", None),
    ("pty", None),
    ("pua", None),
    ("pub", None),
    ("puc", None),
    ("pud", None),
    ("pue", None),
    ("puf", None),
    ("pug", None),
    ("pui", None),
    ("puj", None),
    ("pum", None),
    ("puo", None),
    ("pup", None),
    ("puq", None),
    ("pur", None),
    ("pus", "ps"),
    ("put", None),
    ("puu", None),
    ("puw", None),
    ("pux", None),
    ("puy", None),
    ("pwa", None),
    ("pwb", None),
    ("pwg", None),
    ("pwi", None),
    ("pwm", None),
    ("pwn", None),
    ("pwo", None),
    ("pwr", None),
    ("pww", None),
    ("pxm", None),
    ("pye", None),
    ("pym", None),
    ("pyn", None),
    ("pys", None),
    ("pyu", None),
    ("pyx", None),
    ("pyy", None),
    ("pzh", None),
    ("pzn", None),
    ("qua", None),
    ("qub", None),
    ("quc", None),
    ("qud", None),
    ("que", "qu"),
    ("quf", None),
    ("qug", None),
    ("quh", None),
    ("qui", None),
    ("quk", None),
    ("qul", None),
    ("qum", None),
    ("qun", None),
    ("qup", None),
    ("quq", None),
    ("qur", None),
    ("qus", None),
    ("quv", None),
    ("quw", None),
    ("qux", None),
    ("quy", None),
    ("quz", None),
    ("qva", None),
    ("qvc", None),
    ("qve", None),
    ("qvh", None),
    ("qvi", None),
    ("qvj", None),
    ("qvl", None),
    ("qvm", None),
    ("qvn", None),
    ("qvo", None),
    ("qvp", None),
    ("qvs", None),
    ("qvw", None),
    ("qvy", None),
    ("qvz", None),
    ("qwa", None),
    ("qwc", None),
    ("qwh", None),
    ("qwm", None),
    ("qws", None),
    ("qwt", None),
    ("qxa", None),
    ("qxc", None),
    ("qxh", None),
    ("qxl", None),
    ("qxn", None),
    ("qxo", None),
    ("qxp", None),
    ("qxq", None),
    ("qxr", None),
    ("qxs", None),
    ("qxt", None),
    ("qxu", None),
    ("qxw", None),
    ("qya", None),
    ("qyp", None),
    ("raa", None),
    ("rab", None),
    ("rac", None),
    ("rad", None),
    ("raf", None),
    ("rag", None),
    ("rah", None),
    ("rai", None),
    ("raj", None),
    ("rak", None),
    ("ral", None),
    ("ram", None),
    ("ran", None),
    ("rao", None),
    ("rap", None),
    ("raq", None),
    ("rar", None),
    ("ras", None),
    ("rat", None),
    ("rau", None),
    ("rav", None),
    ("raw", None),
    ("rax", None),
    ("ray", None),
    ("raz", None),
    ("rbb", None),
    ("rbk", None),
    ("rbl", None),
    ("rbp", None),
    ("rcf", None),
    ("rdb", None),
    ("rea", None),
    ("reb", None),
    ("ree", None),
    ("reg", None),
    ("rei", None),
    ("rej", None),
    ("rel", None),
    ("rem", None),
    ("ren", None),
    ("rer", None),
    ("res", None),
    ("ret", None),
    ("rey", None),
    ("rga", None),
    ("rge", None),
    ("rgk", None),
    ("rgn", None),
    ("rgr", None),
    ("rgs", None),
    ("rgu", None),
    ("rhg", None),
    ("rhp", None),
    ("ria", None),
    ("rib", None),
    ("rif", None),
    ("ril", None),
    ("rim", None),
    ("rin", None),
    ("rir", None),
    ("rit", None),
    ("riu", None),
    ("rjg", None),
    ("rji", None),
    ("rjs", None),
    ("rka", None),
    ("rkb", None),
    ("rkh", None),
    ("rki", None),
    ("rkm", None),
    ("rkt", None),
    ("rkw", None),
    ("rma", None),
    ("rmb", None),
    ("rmc", None),
    ("rmd", None),
    ("rme", None),
    ("rmf", None),
    ("rmg", None),
    ("rmh", None),
    ("rmi", None),
    ("rmk", None),
    ("rml", None),
    ("rmm", None),
    ("rmn", None),
    ("rmo", None),
    ("rmp", None),
    ("rmq", None),
    ("rms", None),
    ("rmt", None),
    ("rmu", None),
    ("rmv", None),
    ("rmw", None),
    ("rmx", None),
    ("rmy", None),
    ("rmz", None),
    ("rnb", None),
    ("rnd", None),
    ("rng", None),
    ("rnl", None),
    ("rnn", None),
    ("rnp", None),
    ("rnr", None),
    ("rnw", None),
    ("rob", None),
    ("roc", None),
    ("rod", None),
    ("roe", None),
    ("rof", None),
    ("rog", None),
    ("roh", "rm"),
    ("rol", None),
    ("rom", None),
    ("ron", "ro"),
    ("roo", None),
    ("rop", None),
    ("ror", None),
    ("rou", None),
    ("row", None),
    ("rpn", None),
    ("rpt", None),
    ("rri", None),
    ("rro", None),
    ("rrt", None),
    ("rsb", None),
    ("rsk", None),
    ("rsl", None),
    ("rsm", None),
    ("rsn", None),
    ("rtc", None),
    ("rth", None),
    ("rtm", None),
    ("rts", None),
    ("rtw", None),
    ("rub", None),
    ("ruc", None),
    ("rue", None),
    ("ruf", None),
    ("rug", None),
    ("ruh", None),
    ("rui", None),
    ("ruk", None),
    ("run", "rn"),
    ("ruo", None),
    ("rup", None),
    ("ruq", None),
    ("rus", "ru"),
    ("rut", None),
    ("ruu", None),
    ("ruy", None),
    ("ruz", None),
    ("rwa", None),
    ("rwk", None),
    ("rwl", None),
    ("rwm", None),
    ("rwo", None),
    ("rwr", None),
    ("rxd", None),
    ("rxw", None),
    ("ryn", None),
    ("rys", None),
    ("ryu", None),
    ("rzh", None),
    ("saa", None),
    ("sab", None),
    ("sac", None),
    ("sad", None),
    ("sae", None),
    ("saf", None),
    ("sag", "sg"),
    ("sah", None),
    ("saj", None),
    ("sak", None),
    ("sam", None),
    ("san", "sa"),
    ("sao", None),
    ("saq", None),
    ("sar", None),
    ("sas", None),
    ("sat", None),
    ("sau", None),
    ("sav", None),
    ("saw", None),
    ("sax", None),
    ("say", None),
    ("saz", None),
    ("sba", None),
    ("sbb", None),
    ("sbc", None),
    ("sbd", None),
    ("sbe", None),
    ("sbf", None),
    ("sbg", None),
    ("sbh", None),
    ("sbi", None),
    ("sbj", None),
    ("sbk", None),
    ("sbl", None),
    ("sbm", None),
    ("sbn", None),
    ("sbo", None),
    ("sbp", None),
    ("sbq", None),
    ("sbr", None),
    ("sbs", None),
    ("sbt", None),
    ("sbu", None),
    ("sbv", None),
    ("sbw", None),
    ("sbx", None),
    ("sby", None),
    ("sbz", None),
    ("scb", None),
    ("sce", None),
    ("scf", None),
    ("scg", None),
    ("sch", None),
    ("sci", None),
    ("sck", None),
    ("scl", None),
    ("scn", None),
    ("sco", None),
    ("scp", None),
    ("scq", None),
    ("scs", None),
    ("sct", None),
    ("scu", None),
    ("scv", None),
    ("scw", None),
    ("scx", None),
    ("sda", None),
    ("sdb", None),
    ("sdc", None),
    ("sde", None),
    ("sdf", None),
    ("sdg", None),
    ("sdh", None),
    ("sdj", None),
    ("sdk", None),
    ("sdl", None),
    ("sdn", None),
    ("sdo", None),
    ("sdp", None),
    ("sdq", None),
    ("sdr", None),
    ("sds", None),
    ("sdt", None),
    ("sdu", None),
    ("sdx", None),
    ("sdz", None),
    ("sea", None),
    ("seb", None),
    ("sec", None),
    ("sed", None),
    ("see", None),
    ("sef", None),
    ("seg", None),
    ("seh", None),
    ("sei", None),
    ("sej", None),
    ("sek", None),
    ("sel", None),
    ("sen", None),
    ("seo", None),
    ("sep", None),
    ("seq", None),
    ("ser", None),
    ("ses", None),
    ("set", None),
    ("seu", None),
    ("sev", None),
    ("sew", None),
    ("sey", None),
    ("sez", None),
    ("sfb", None),
    ("sfe", None),
    ("sfm", None),
    ("sfs", None),
    ("sfw", None),
    ("sga", None),
    ("sgb", None),
    ("sgc", None),
    ("sgd", None),
    ("sge", None),
    ("sgg", None),
    ("sgh", None),
    ("sgi", None),
    ("sgj", None),
    ("sgk", None),
    ("sgm", None),
    ("sgp", None),
    ("sgr", None),
    ("sgs", None),
    ("sgt", None),
    ("sgu", None),
    ("sgw", None),
    ("sgx", None),
    ("sgy", None),
    ("sgz", None),
    ("sha", None),
    ("shb", None),
    ("shc", None),
    ("shd", None),
    ("she", None),
    ("shg", None),
    ("shh", None),
    ("shi", None),
    ("shj", None),
    ("shk", None),
    ("shl", None),
    ("shm", None),
    ("shn", None),
    ("sho", None),
    ("shp", None),
    ("shq", None),
    ("shr", None),
    ("shs", None),
    ("sht", None),
    ("shu", None),
    ("shv", None),
    ("shw", None),
    ("shx", None),
    ("shy", None),
    ("shz", None),
    ("sia", None),
    ("sib", None),
    ("sid", None),
    ("sie", None),
    ("sif", None),
    ("sig", None),
    ("sih", None),
    ("sii", None),
    ("sij", None),
    ("sik", None),
    ("sil", None),
    ("sim", None),
    ("sin", "si"),
    ("sip", None),
    ("siq", None),
    ("sir", None),
    ("sis", None),
    ("siu", None),
    ("siv", None),
    ("siw", None),
    ("six", None),
    ("siy", None),
    ("siz", None),
    ("sja", None),
    ("sjb", None),
    ("sjd", None),
    ("sje", None),
    ("sjg", None),
    ("sjk", None),
    ("sjl", None),
    ("sjm", None),
    ("sjn", None),
    ("sjo", None),
    ("sjp", None),
    ("sjr", None),
    ("sjs", None),
    ("sjt", None),
    ("sju", None),
    ("sjw", None),
    ("ska", None),
    ("skb", None),
    ("skc", None),
    ("skd", None),
    ("ske", None),
    ("skf", None),
    ("skg", None),
    ("skh", None),
    ("ski", None),
    ("skj", None),
    ("skm", None),
    ("skn", None),
    ("sko", None),
    ("skp", None),
    ("skq", None),
    ("skr", None),
    ("sks", None),
    ("skt", None),
    ("sku", None),
    ("skv", None),
    ("skw", None),
    ("skx", None),
    ("sky", None),
    ("skz", None),
    ("slc", None),
    ("sld", None),
    ("sle", None),
    ("slf", None),
    ("slg", None),
    ("slh", None),
    ("sli", None),
    ("slj", None),
    ("slk", "sk"),
    ("sll", None),
    ("slm", None),
    ("sln", None),
    ("slp", None),
    ("slq", None),
    ("slr", None),
    ("sls", None),
    ("slt", None),
    ("slu", None),
    ("slv", "sl"),
    ("slw", None),
    ("slx", None),
    ("sly", None),
    ("slz", None),
    ("sma", None),
    ("smb", None),
    ("smc", None),
    ("sme", "se"),
    ("smf", None),
    ("smg", None),
    ("smh", None),
    ("smj", None),
    ("smk", None),
    ("sml", None),
    ("smm", None),
    ("smn", None),
    ("smo", "sm"),
    ("smp", None),
    ("smq", None),
    ("smr", None),
    ("sms", None),
    ("smt", None),
    ("smu", None),
    ("smv", None),
    ("smw", None),
    ("smx", None),
    ("smy", None),
    ("smz", None),
    ("sna", "sn"),
    ("snc", None),
    ("snd", "sd"),
    ("sne", None),
    ("snf", None),
    ("sng", None),
    ("sni", None),
    ("snj", None),
    ("snk", None),
    ("snl", None),
    ("snm", None),
    ("snn", None),
    ("sno", None),
    ("snp", None),
    ("snq", None),
    ("snr", None),
    ("sns", None),
    ("snu", None),
    ("snv", None),
    ("snw", None),
    ("snx", None),
    ("sny", None),
    ("snz", None),
    ("soa", None),
    ("sob", None),
    ("soc", None),
    ("sod", None),
    ("soe", None),
    ("sog", None),
    ("soh", None),
    ("soi", None),
    ("soj", None),
    ("sok", None),
    ("sol", None),
    ("som", "so"),
    ("soo", None),
    ("sop", None),
    ("soq", None),
    ("sor", None),
    ("sos", None),
    ("sot", "st"),
    ("sou", None),
    ("sov", None),
    ("sow", None),
    ("sox", None),
    ("soy", None),
    ("soz", None),
    ("spa", "es"),
    ("spb", None),
    ("spc", None),
    ("spd", None),
    ("spe", None),
    ("spg", None),
    ("spi", None),
    ("spk", None),
    ("spl", None),
    ("spm", None),
    ("spn", None),
    ("spo", None),
    ("spp", None),
    ("spq", None),
    ("spr", None),
    ("sps", None),
    ("spt", None),
    ("spu", None),
    ("spv", None),
    ("spx", None),
    ("spy", None),
    ("sqa", None),
    ("sqh", None),
    ("sqi", "sq"),
    ("sqk", None),
    ("sqm", None),
    ("sqn", None),
    ("sqo", None),
    ("sqq", None),
    ("sqr", None),
    ("sqs", None),
    ("sqt", None),
    ("squ", None),
    ("sqx", None),
    ("sra", None),
    ("srb", None),
    ("src", None),
    ("srd", "sc"),
    ("sre", None),
    ("srf", None),
    ("srg", None),
    ("srh", None),
    ("sri", None),
    ("srk", None),
    ("srl", None),
    ("srm", None),
    ("srn", None),
    ("sro", None),
    ("srp", "sr"),
    ("srq", None),
    ("srr", None),
    ("srs", None),
    ("srt", None),
    ("sru", None),
    ("srv", None),
    ("srw", None),
    ("srx", None),
    ("sry", None),
    ("srz", None),
    ("ssb", None),
    ("ssc", None),
    ("ssd", None),
    ("sse", None),
    ("ssf", None),
    ("ssg", None),
    ("ssh", None),
    ("ssi", None),
    ("ssj", None),
    ("ssk", None),
    ("ssl", None),
    ("ssm", None),
    ("ssn", None),
    ("sso", None),
    ("ssp", None),
    ("ssq", None),
    ("ssr", None),
    ("sss", None),
    ("sst", None),
    ("ssu", None),
    ("ssv", None),
    ("ssw", "ss"),
    ("ssx", None),
    ("ssy", None),
    ("ssz", None),
    ("sta", None),
    ("stb", None),
    ("std", None),
    ("ste", None),
    ("stf", None),
    ("stg", None),
    ("sth", None),
    ("sti", None),
    ("stj", None),
    ("stk", None),
    ("stl", None),
    ("stm", None),
    ("stn", None),
    ("sto", None),
    ("stp", None),
    ("stq", None),
    ("str", None),
    ("sts", None),
    ("stt", None),
    ("stu", None),
    ("stv", None),
    ("stw", None),
    ("sty", None),
    ("sua", None),
    ("sub", None),
    ("suc", None),
    ("sue", None),
    ("sug", None),
    ("sui", None),
    ("suj", None),
    ("suk", None),
    ("sun", "su"),
    ("suo", None),
    ("suq", None),
    ("sur", None),
    ("sus", None),
    ("sut", None),
    ("suv", None),
    ("suw", None),
    ("sux", None),
    ("suy", None),
    ("suz", None),
    ("sva", None),
    ("svb", None),
    ("svc", None),
    ("sve", None),
    ("svk", None),
    ("svm", None),
    ("svs", None),
    ("svx", None),
    ("swa", "sw"),
    ("swb", None),
    ("swc", None),
    ("swe", "sv"),
    ("swf", None),
    ("swg", None),
    ("swh", None),
    ("swi", None),
    ("swj", None),
    ("swk", None),
    ("swl", None),
    ("swm", None),
    ("swn", None),
    ("swo", None),
    ("swp", None),
    ("swq", None),
    ("swr", None),
    ("sws", None),
    ("swt", None),
    ("swu", None),
    ("swv", None),
    ("sww", None),
    ("swx", None),
    ("swy", None),
    ("sxb", None),
    ("sxc", None),
    ("sxe", None),
    ("sxg", None),
    ("sxk", None),
    ("sxl", None),
    ("sxm", None),
    ("sxn", None),
    ("sxo", None),
    ("sxr", None),
    ("sxs", None),
    ("sxu", None),
    ("sxw", None),
    ("sya", None),
    ("syb", None),
    ("syc", None),
    ("syi", None),
    ("syk", None),
    ("syl", None),
    ("sym", None),
    ("syn", None),
    ("syo", None),
    ("syr", None),
    ("sys", None),
    ("syw", None),
    ("syx", None),
    ("syy", None),
    ("sza", None),
    ("szb", None),
    ("szc", None),
    ("szd", None),
    ("sze", None),
    ("szg", None),
    ("szl", None),
    ("szn", None),
    ("szp", None),
    ("szs", None),
    ("szv", None),
    ("szw", None),
    ("szy", None),
    ("taa", None),
    ("tab", None),
    ("tac", None),
    ("tad", None),
    ("tae", None),
    ("taf", None),
    ("tag", None),
    ("tah", "ty"),
    ("taj", None),
    ("tak", None),
    ("tal", None),
    ("tam", "ta"),
    ("tan", None),
    ("tao", None),
    ("tap", None),
    ("taq", None),
    ("tar", None),
    ("tas", None),
    ("tat", "tt"),
    ("tau", None),
    ("tav", None),
    ("taw", None),
    ("tax", None),
    ("tay", None),
    ("taz", None),
    ("tba", None),
    ("tbc", None),
    ("tbd", None),
    ("tbe", None),
    ("tbf", None),
    ("tbg", None),
    ("tbh", None),
    ("tbi", None),
    ("tbj", None),
    ("tbk", None),
    ("tbl", None),
    ("tbm", None),
    ("tbn", None),
    ("tbo", None),
    ("tbp", None),
    ("tbr", None),
    ("tbs", None),
    ("tbt", None),
    ("tbu", None),
    ("tbv", None),
    ("tbw", None),
    ("tbx", None),
    ("tby", None),
    ("tbz", None),
    ("tca", None),
    ("tcb", None),
    ("tcc", None),
    ("tcd", None),
    ("tce", None),
    ("tcf", None),
    ("tcg", None),
    ("tch", None),
    ("tci", None),
    ("tck", None),
    ("tcl", None),
    ("tcm", None),
    ("tcn", None),
    ("tco", None),
    ("tcp", None),
    ("tcq", None),
    ("tcs", None),
    ("tct", None),
    ("tcu", None),
    ("tcw", None),
    ("tcx", None),
    ("tcy", None),
    ("tcz", None),
    ("tda", None),
    ("tdb", None),
    ("tdc", None),
    ("tdd", None),
    ("tde", None),
    ("tdf", None),
    ("tdg", None),
    ("tdh", None),
    ("tdi", None),
    ("tdj", None),
    ("tdk", None),
    ("tdl", None),
    ("tdm", None),
    ("tdn", None),
    ("tdo", None),
    ("tdq", None),
    ("tdr", None),
    ("tds", None),
    ("tdt", None),
    ("tdv", None),
    ("tdx", None),
    ("tdy", None),
    ("tea", None),
    ("teb", None),
    ("tec", None),
    ("ted", None),
    ("tee", None),
    ("tef", None),
    ("teg", None),
    ("teh", None),
    ("tei", None),
    ("tek", None),
    ("tel", "te"),
    ("tem", None),
    ("ten", None),
    ("teo", None),
    ("tep", None),
    ("teq", None),
    ("ter", None),
    ("tes", None),
    ("tet", None),
    ("teu", None),
    ("tev", None),
    ("tew", None),
    ("tex", None),
    ("tey", None),
    ("tez", None),
    ("tfi", None),
    ("tfn", None),
    ("tfo", None),
    ("tfr", None),
    ("tft", None),
    ("tga", None),
    ("tgb", None),
    ("tgc", None),
    ("tgd", None),
    ("tge", None),
    ("tgf", None),
    ("tgh", None),
    ("tgi", None),
    ("tgj", None),
    ("tgk", "tg"),
    ("tgl", "tl"),
    ("tgn", None),
    ("tgo", None),
    ("tgp", None),
    ("tgq", None),
    ("tgr", None),
    ("tgs", None),
    ("tgt", None),
    ("tgu", None),
    ("tgv", None),
    ("tgw", None),
    ("tgx", None),
    ("tgy", None),
    ("tgz", None),
    ("tha", "th"),
    ("thd", None),
    ("the", None),
    ("thf", None),
    ("thh", None),
    ("thi", None),
    ("thk", None),
    ("thl", None),
    ("thm", None),
    ("thn", None),
    ("thp", None),
    ("thq", None),
    ("thr", None),
    ("ths", None),
    ("tht", None),
    ("thu", None),
    ("thv", None),
    ("thy", None),
    ("thz", None),
    ("tia", None),
    ("tic", None),
    ("tif", None),
    ("tig", None),
    ("tih", None),
    ("tii", None),
    ("tij", None),
    ("tik", None),
    ("til", None),
    ("tim", None),
    ("tin", None),
    ("tio", None),
    ("tip", None),
    ("tiq", None),
    ("tir", "ti"),
    ("tis", None),
    ("tit", None),
    ("tiu", None),
    ("tiv", None),
    ("tiw", None),
    ("tix", None),
    ("tiy", None),
    ("tiz", None),
    ("tja", None),
    ("tjg", None),
    ("tji", None),
    ("tjj", None),
    ("tjl", None),
    ("tjm", None),
    ("tjn", None),
    ("tjo", None),
    ("tjp", None),
    ("tjs", None),
    ("tju", None),
    ("tjw", None),
    ("tka", None),
    ("tkb", None),
    ("tkd", None),
    ("tke", None),
    ("tkf", None),
    ("tkg", None),
    ("tkl", None),
    ("tkm", None),
    ("tkn", None),
    ("tkp", None),
    ("tkq", None),
    ("tkr", None),
    ("tks", None),
    ("tkt", None),
    ("tku", None),
    ("tkv", None),
    ("tkw", None),
    ("tkx", None),
    ("tkz", None),
    ("tla", None),
    ("tlb", None),
    ("tlc", None),
    ("tld", None),
    ("tlf", None),
    ("tlg", None),
    ("tlh", None),
    ("tli", None),
    ("tlj", None),
    ("tlk", None),
    ("tll", None),
    ("tlm", None),
    ("tln", None),
    ("tlo", None),
    ("tlp", None),
    ("tlq", None),
    ("tlr", None),
    ("tls", None),
    ("tlt", None),
    ("tlu", None),
    ("tlv", None),
    ("tlx", None),
    ("tly", None),
    ("tma", None),
    ("tmb", None),
    ("tmc", None),
    ("tmd", None),
    ("tme", None),
    ("tmf", None),
    ("tmg", None),
    ("tmh", None),
    ("tmi", None),
    ("tmj", None),
    ("tmk", None),
    ("tml", None),
    ("tmm", None),
    ("tmn", None),
    ("tmo", None),
    ("tmq", None),
    ("tmr", None),
    ("tms", None),
    ("tmt", None),
    ("tmu", None),
    ("tmv", None),
    ("tmw", None),
    ("tmy", None),
    ("tmz", None),
    ("tna", None),
    ("tnb", None),
    ("tnc", None),
    ("tnd", None),
    ("tng", None),
    ("tnh", None),
    ("tni", None),
    ("tnk", None),
    ("tnl", None),
    ("tnm", None),
    ("tnn", None),
    ("tno", None),
    ("tnp", None),
    ("tnq", None),
    ("tnr", None),
    ("tns", None),
    ("tnt", None),
    ("tnu", None),
    ("tnv", None),
    ("tnw", None),
    ("tnx", None),
    ("tny", None),
    ("tnz", None),
    ("tob", None),
    ("toc", None),
    ("tod", None),
    ("tof", None),
    ("tog", None),
    ("toh", None),
    ("toi", None),
    ("toj", None),
    ("tok", None),
    ("tol", None),
    ("tom", None),
    ("ton", "to"),
    ("too", None),
    ("top", None),
    ("toq", None),
    ("tor", None),
    ("tos", None),
    ("tou", None),
    ("tov", None),
    ("tow", None),
    ("tox", None),
    ("toy", None),
    ("toz", None),
    ("tpa", None),
    ("tpc", None),
    ("tpe", None),
    ("tpf", None),
    ("tpg", None),
    ("tpi", None),
    ("tpj", None),
    ("tpk", None),
    ("tpl", None),
    ("tpm", None),
    ("tpn", None),
    ("tpo", None),
    ("tpp", None),
    ("tpq", None),
    ("tpr", None),
    ("tpt", None),
    ("tpu", None),
    ("tpv", None),
    ("tpw", None),
    ("tpx", None),
    ("tpy", None),
    ("tpz", None),
    ("tqb", None),
    ("tql", None),
    ("tqm", None),
    ("tqn", None),
    ("tqo", None),
    ("tqp", None),
    ("tqq", None),
    ("tqr", None),
    ("tqt", None),
    ("tqu", None),
    ("tqw", None),
    ("tra", None),
    ("trb", None),
    ("trc", None),
    ("trd", None),
    ("tre", None),
    ("trf", None),
    ("trg", None),
    ("trh", None),
    ("tri", None),
    ("trj", None),
    ("trl", None),
    ("trm", None),
    ("trn", None),
    ("tro", None),
    ("trp", None),
    ("trq", None),
    ("trr", None),
    ("trs", None),
    ("trt", None),
    ("tru", None),
    ("trv", None),
    ("trw", None),
    ("trx", None),
    ("try", None),
    ("trz", None),
    ("tsa", None),
    ("tsb", None),
    ("tsc", None),
    ("tsd", None),
    ("tse", None),
    ("tsg", None),
    ("tsh", None),
    ("tsi", None),
    ("tsj", None),
    ("tsk", None),
    ("tsl", None),
    ("tsm", None),
    ("tsn", "tn"),
    ("tso", "ts"),
    ("tsp", None),
    ("tsq", None),
    ("tsr", None),
    ("tss", None),
    ("tst", None),
    ("tsu", None),
    ("tsv", None),
    ("tsw", None),
    ("tsx", None),
    ("tsy", None),
    ("tsz", None),
    ("tta", None),
    ("ttb", None),
    ("ttc", None),
    ("ttd", None),
    ("tte", None),
    ("ttf", None),
    ("ttg", None),
    ("tth", None),
    ("tti", None),
    ("ttj", None),
    ("ttk", None),
    ("ttl", None),
    ("ttm", None),
    ("ttn", None),
    ("tto", None),
    ("ttp", None),
    ("ttq", None),
    ("ttr", None),
    ("tts", None),
    ("ttt", None),
    ("ttu", None),
    ("ttv", None),
    ("ttw", None),
    ("tty", None),
    ("ttz", None),
    ("tua", None),
    ("tub", None),
    ("tuc", None),
    ("tud", None),
    ("tue", None),
    ("tuf", None),
    ("tug", None),
    ("tuh", None),
    ("tui", None),
    ("tuj", None),
    ("tuk", "tk"),
    ("tul", None),
    ("tum", None),
    ("tun", None),
    ("tuo", None),
    ("tuq", None),
    ("tur", "tr"),
    ("tus", None),
    ("tuu", None),
    ("tuv", None),
    ("tux", None),
    ("tuy", None),
    ("tuz", None),
    ("tva", None),
    ("tvd", None),
    ("tve", None),
    ("tvk", None),
    ("tvl", None),
    ("tvm", None),
    ("tvn", None),
    ("tvo", None),
    ("tvs", None),
    ("tvt", None),
    ("tvu", None),
    ("tvw", None),
    ("tvx", None),
    ("tvy", None),
    ("twa", None),
    ("twb", None),
    ("twc", None),
    ("twd", None),
    ("twe", None),
    ("twf", None),
    ("twg", None),
    ("twh", None),
    ("twi", "tw"),
    ("twl", None),
    ("twm", None),
    ("twn", None),
    ("two", None),
    ("twp", None),
    ("twq", None),
    ("twr", None),
    ("twt", None),
    ("twu", None),
    ("tww", None),
    ("twx", None),
    ("twy", None),
    ("txa", None),
    ("txb", None),
    ("txc", None),
    ("txe", None),
    ("txg", None),
    ("txh", None),
    ("txi", None),
    ("txj", None),
    ("txm", None),
    ("txn", None),
    ("txo", None),
    ("txq", None),
    ("txr", None),
    ("txs", None),
    ("txt", None),
    ("txu", None),
    ("txx", None),
    ("txy", None),
    ("tya", None),
    ("tye", None),
    ("tyh", None),
    ("tyi", None),
    ("tyj", None),
    ("tyl", None),
    ("tyn", None),
    ("typ", None),
    ("tyr", None),
    ("tys", None),
    ("tyt", None),
    ("tyu", None),
    ("tyv", None),
    ("tyx", None),
    ("tyy", None),
    ("tyz", None),
    ("tza", None),
    ("tzh", None),
    ("tzj", None),
    ("tzl", None),
    ("tzm", None),
    ("tzn", None),
    ("tzo", None),
    ("tzx", None),
    ("uam", None),
    ("uan", None),
    ("uar", None),
    ("uba", None),
    ("ubi", None),
    ("ubl", None),
    ("ubr", None),
    ("ubu", None),
    ("uby", None),
    ("uda", None),
    ("ude", None),
    ("udg", None),
    ("udi", None),
    ("udj", None),
    ("udl", None),
    ("udm", None),
    ("udu", None),
    ("ues", None),
    ("ufi", None),
    ("uga", None),
    ("ugb", None),
    ("uge", None),
    ("ugh", None),
    ("ugn", None),
    ("ugo", None),
    ("ugy", None),
    ("uha", None),
    ("uhn", None),
    ("uig", "ug"),
    ("uis", None),
    ("uiv", None),
    ("uji", None),
    ("uka", None),
    ("ukg", None),
    ("ukh", None),
    ("uki", None),
    ("ukk", None),
    ("ukl", None),
    ("ukp", None),
    ("ukq", None),
    ("ukr", "uk"),
    ("uks", None),
    ("uku", None),
    ("ukv", None),
    ("ukw", None),
    ("uky", None),
    ("ula", None),
    ("ulb", None),
    ("ulc", None),
    ("ule", None),
    ("ulf", None),
    ("uli", None),
    ("ulk", None),
    ("ull", None),
    ("ulm", None),
    ("uln", None),
    ("ulu", None),
    ("ulw", None),
    ("uma", None),
    ("umb", None),
    ("umc", None),
    ("umd", None),
    ("umg", None),
    ("umi", None),
    ("umm", None),
    ("umn", None),
    ("umo", None),
    ("ump", None),
    ("umr", None),
    ("ums", None),
    ("umu", None),
    ("una", None),
    ("und", None),
    ("une", None),
    ("ung", None),
    ("uni", None),
    ("unk", None),
    ("unm", None),
    ("unn", None),
    ("unr", None),
    ("unu", None),
    ("unx", None),
    ("unz", None),
    ("uon", None),
    ("upi", None),
    ("upv", None),
    ("ura", None),
    ("urb", None),
    ("urc", None),
    ("urd", "ur"),
    ("ure", None),
    ("urf", None),
    ("urg", None),
    ("urh", None),
    ("uri", None),
    ("urk", None),
    ("url", None),
    ("urm", None),
    ("urn", None),
    ("uro", None),
    ("urp", None),
    ("urr", None),
    ("urt", None),
    ("uru", None),
    ("urv", None),
    ("urw", None),
    ("urx", None),
    ("ury", None),
    ("urz", None),
    ("usa", None),
    ("ush", None),
    ("usi", None),
    ("usk", None),
    ("usp", None),
    ("uss", None),
    ("usu", None),
    ("uta", None),
    ("ute", None),
    ("uth", None),
    ("utp", None),
    ("utr", None),
    ("utu", None),
    ("uum", None),
    ("uur", None),
    ("uuu", None),
    ("uve", None),
    ("uvh", None),
    ("uvl", None),
    ("uwa", None),
    ("uya", None),
    ("uzb", "uz"),
    ("uzn", None),
    ("uzs", None),
    ("vaa", None),
    ("vae", None),
    ("vaf", None),
    ("vag", None),
    ("vah", None),
    ("vai", None),
    ("vaj", None),
    ("val", None),
    ("vam", None),
    ("van", None),
    ("vao", None),
    ("vap", None),
    ("var", None),
    ("vas", None),
    ("vau", None),
    ("vav", None),
    ("vay", None),
    ("vbb", None),
    ("vbk", None),
    ("vec", None),
    ("ved", None),
    ("vel", None),
    ("vem", None),
    ("ven", "ve"),
    ("veo", None),
    ("vep", None),
    ("ver", None),
    ("vgr", None),
    ("vgt", None),
    ("vic", None),
    ("vid", None),
    ("vie", "vi"),
    ("vif", None),
    ("vig", None),
    ("vil", None),
    ("vin", None),
    ("vis", None),
    ("vit", None),
    ("viv", None),
    ("vka", None),
    ("vkj", None),
    ("vkk", None),
    ("vkl", None),
    ("vkm", None),
    ("vkn", None),
    ("vko", None),
    ("vkp", None),
    ("vkt", None),
    ("vku", None),
    ("vkz", None),
    ("vlp", None),
    ("vls", None),
    ("vma", None),
    ("vmb", None),
    ("vmc", None),
    ("vmd", None),
    ("vme", None),
    ("vmf", None),
    ("vmg", None),
    ("vmh", None),
    ("vmi", None),
    ("vmj", None),
    ("vmk", None),
    ("vml", None),
    ("vmm", None),
    ("vmp", None),
    ("vmq", None),
    ("vmr", None),
    ("vms", None),
    ("vmu", None),
    ("vmv", None),
    ("vmw", None),
    ("vmx", None),
    ("vmy", None),
    ("vmz", None),
    ("vnk", None),
    ("vnm", None),
    ("vnp", None),
    ("vol", "vo"),
    ("vor", None),
    ("vot", None),
    ("vra", None),
    ("vro", None),
    ("vrs", None),
    ("vrt", None),
    ("vsi", None),
    ("vsl", None),
    ("vsv", None),
    ("vto", None),
    ("vum", None),
    ("vun", None),
    ("vut", None),
    ("vwa", None),
    ("waa", None),
    ("wab", None),
    ("wac", None),
    ("wad", None),
    ("wae", None),
    ("waf", None),
    ("wag", None),
    ("wah", None),
    ("wai", None),
    ("waj", None),
    ("wal", None),
    ("wam", None),
    ("wan", None),
    ("wao", None),
    ("wap", None),
    ("waq", None),
    ("war", None),
    ("was", None),
    ("wat", None),
    ("wau", None),
    ("wav", None),
    ("waw", None),
    ("wax", None),
    ("way", None),
    ("waz", None),
    ("wba", None),
    ("wbb", None),
    ("wbe", None),
    ("wbf", None),
    ("wbh", None),
    ("wbi", None),
    ("wbj", None),
    ("wbk", None),
    ("wbl", None),
    ("wbm", None),
    ("wbp", None),
    ("wbq", None),
    ("wbr", None),
    ("wbs", None),
    ("wbt", None),
    ("wbv", None),
    ("wbw", None),
    ("wca", None),
    ("wci", None),
    ("wdd", None),
    ("wdg", None),
    ("wdj", None),
    ("wdk", None),
    ("wdt", None),
    ("wdu", None),
    ("wdy", None),
    ("wea", None),
    ("wec", None),
    ("wed", None),
    ("weg", None),
    ("weh", None),
    ("wei", None),
    ("wem", None),
    ("weo", None),
    ("wep", None),
    ("wer", None),
    ("wes", None),
    ("wet", None),
    ("weu", None),
    ("wew", None),
    ("wfg", None),
    ("wga", None),
    ("wgb", None),
    ("wgg", None),
    ("wgi", None),
    ("wgo", None),
    ("wgu", None),
    ("wgy", None),
    ("wha", None),
    ("whg", None),
    ("whk", None),
    ("whu", None),
    ("wib", None),
    ("wic", None),
    ("wie", None),
    ("wif", None),
    ("wig", None),
    ("wih", None),
    ("wii", None),
    ("wij", None),
    ("wik", None),
    ("wil", None),
    ("wim", None),
    ("win", None),
    ("wir", None),
    ("wiu", None),
    ("wiv", None),
    ("wiy", None),
    ("wja", None),
    ("wji", None),
    ("wka", None),
    ("wkb", None),
    ("wkd", None),
    ("wkl", None),
    ("wkr", None),
    ("wku", None),
    ("wkw", None),
    ("wky", None),
    ("wla", None),
    ("wlc", None),
    ("wle", None),
    ("wlg", None),
    ("wlh", None),
    ("wli", None),
    ("wlk", None),
    ("wll", None),
    ("wlm", None),
    ("wln", "wa"),
    ("wlo", None),
    ("wlr", None),
    ("wls", None),
    ("wlu", None),
    ("wlv", None),
    ("wlw", None),
    ("wlx", None),
    ("wly", None),
    ("wma", None),
    ("wmb", None),
    ("wmc", None),
    ("wmd", None),
    ("wme", None),
    ("wmg", None),
    ("wmh", None),
    ("wmi", None),
    ("wmm", None),
    ("wmn", None),
    ("wmo", None),
    ("wms", None),
    ("wmt", None),
    ("wmw", None),
    ("wmx", None),
    ("wnb", None),
    ("wnc", None),
    ("wnd", None),
    ("wne", None),
    ("wng", None),
    ("wni", None),
    ("wnk", None),
    ("wnm", None),
    ("wnn", None),
    ("wno", None),
    ("wnp", None),
    ("wnu", None),
    ("wnw", None),
    ("wny", None),
    ("woa", None),
    ("wob", None),
    ("woc", None),
    ("wod", None),
    ("woe", None),
    ("wof", None),
    ("wog", None),
    ("woi", None),
    ("wok", None),
    ("wol", "wo"),
    ("wom", None),
    ("won", None),
    ("woo", None),
    ("wor", None),
    ("wos", None),
    ("wow", None),
    ("woy", None),
    ("wpc", None),
    ("wrb", None),
    ("wrg", None),
    ("wrh", None),
    ("wri", None),
    ("wrk", None),
    ("wrl", None),
    ("wrm", None),
    ("wrn", None),
    ("wro", None),
    ("wrp", None),
    ("wrr", None),
    ("wrs", None),
    ("wru", None),
    ("wrv", None),
    ("wrw", None),
    ("wrx", None),
    ("wry", None),
    ("wrz", None),
    ("wsa", None),
    ("wsg", None),
    ("wsi", None),
    ("wsk", None),
    ("wsr", None),
    ("wss", None),
    ("wsu", None),
    ("wsv", None),
    ("wtf", None),
    ("wth", None),
    ("wti", None),
    ("wtk", None),
    ("wtm", None),
    ("wtw", None),
    ("wua", None),
    ("wub", None),
    ("wud", None),
    ("wuh", None),
    ("wul", None),
    ("wum", None),
    ("wun", None),
    ("wur", None),
    ("wut", None),
    ("wuu", None),
    ("wuv", None),
    ("wux", None),
    ("wuy", None),
    ("wwa", None),
    ("wwb", None),
    ("wwo", None),
    ("wwr", None),
    ("www", None),
    ("wxa", None),
    ("wxw", None),
    ("wyb", None),
    ("wyi", None),
    ("wym", None),
    ("wyn", None),
    ("wyr", None),
    ("wyy", None),
    ("xaa", None),
    ("xab", None),
    ("xac", None),
    ("xad", None),
    ("xae", None),
    ("xag", None),
    ("xai", None),
    ("xaj", None),
    ("xak", None),
    ("xal", None),
    ("xam", None),
    ("xan", None),
    ("xao", None),
    ("xap", None),
    ("xaq", None),
    ("xar", None),
    ("xas", None),
    ("xat", None),
    ("xau", None),
    ("xav", None),
    ("xaw", None),
    ("xay", None),
    ("xbb", None),
    ("xbc", None),
    ("xbd", None),
    ("xbe", None),
    ("xbg", None),
    ("xbi", None),
    ("xbj", None),
    ("xbm", None),
    ("xbn", None),
    ("xbo", None),
    ("xbp", None),
    ("xbr", None),
    ("xbw", None),
    ("xby", None),
    ("xcb", None),
    ("xcc", None),
    ("xce", None),
    ("xcg", None),
    ("xch", None),
    ("xcl", None),
    ("xcm", None),
    ("xcn", None),
    ("xco", None),
    ("xcr", None),
    ("xct", None),
    ("xcu", None),
    ("xcv", None),
    ("xcw", None),
    ("xcy", None),
    ("xda", None),
    ("xdc", None),
    ("xdk", None),
    ("xdm", None),
    ("xdo", None),
    ("xdq", None),
    ("xdy", None),
    ("xeb", None),
    ("xed", None),
    ("xeg", None),
    ("xel", None),
    ("xem", None),
    ("xep", None),
    ("xer", None),
    ("xes", None),
    ("xet", None),
    ("xeu", None),
    ("xfa", None),
    ("xga", None),
    ("xgb", None),
    ("xgd", None),
    ("xgf", None),
    ("xgg", None),
    ("xgi", None),
    ("xgl", None),
    ("xgm", None),
    ("xgr", None),
    ("xgu", None),
    ("xgw", None),
    ("xha", None),
    ("xhc", None),
    ("xhd", None),
    ("xhe", None),
    ("xhm", None),
    ("xho", "xh"),
    ("xhr", None),
    ("xht", None),
    ("xhu", None),
    ("xhv", None),
    ("xib", None),
    ("xii", None),
    ("xil", None),
    ("xin", None),
    ("xir", None),
    ("xis", None),
    ("xiv", None),
    ("xiy", None),
    ("xjb", None),
    ("xjt", None),
    ("xka", None),
    ("xkb", None),
    ("xkc", None),
    ("xkd", None),
    ("xke", None),
    ("xkf", None),
    ("xkg", None),
    ("xki", None),
    ("xkj", None),
    ("xkk", None),
    ("xkl", None),
    ("xkn", None),
    ("xko", None),
    ("xkp", None),
    ("xkq", None),
    ("xkr", None),
    ("xks", None),
    ("xkt", None),
    ("xku", None),
    ("xkv", None),
    ("xkw", None),
    ("xkx", None),
    ("xky", None),
    ("xkz", None),
    ("xla", None),
    ("xlb", None),
    ("xlc", None),
    ("xld", None),
    ("xle", None),
    ("xlg", None),
    ("xli", None),
    ("xln", None),
    ("xlo", None),
    ("xlp", None),
    ("xls", None),
    ("xlu", None),
    ("xly", None),
    ("xma", None),
    ("xmb", None),
    ("xmc", None),
    ("xmd", None),
    ("xme", None),
    ("xmf", None),
    ("xmg", None),
    ("xmh", None),
    ("xmj", None),
    ("xmk", None),
    ("xml", None),
    ("xmm", None),
    ("xmn", None),
    ("xmo", None),
    ("xmp", None),
    ("xmq", None),
    ("xmr", None),
    ("xms", None),
    ("xmt", None),
    ("xmu", None),
    ("xmv", None),
    ("xmw", None),
    ("xmx", None),
    ("xmy", None),
    ("xmz", None),
    ("xna", None),
    ("xnb", None),
    ("xng", None),
    ("xnh", None),
    ("xni", None),
    ("xnj", None),
    ("xnk", None),
    ("xnm", None),
    ("xnn", None),
    ("xno", None),
    ("xnq", None),
    ("xnr", None),
    ("xns", None),
    ("xnt", None),
    ("xnu", None),
    ("xny", None),
    ("xnz", None),
    ("xoc", None),
    ("xod", None),
    ("xog", None),
    ("xoi", None),
    ("xok", None),
    ("xom", None),
    ("xon", None),
    ("xoo", None),
    ("xop", None),
    ("xor", None),
    ("xow", None),
    ("xpa", None),
    ("xpb", None),
    ("xpc", None),
    ("xpd", None),
    ("xpe", None),
    ("xpf", None),
    ("xpg", None),
    ("xph", None),
    ("xpi", None),
    ("xpj", None),
    ("xpk", None),
    ("xpl", None),
    ("xpm", None),
    ("xpn", None),
    ("xpo", None),
    ("xpp", None),
    ("xpq", None),
    ("xpr", None),
    ("xps", None),
    ("xpt", None),
    ("xpu", None),
    ("xpv", None),
    ("xpw", None),
    ("xpx", None),
    ("xpy", None),
    ("xpz", None),
    ("xqa", None),
    ("xqt", None),
    ("xra", None),
    ("xrb", None),
    ("xrd", None),
    ("xre", None),
    ("xrg", None),
    ("xri", None),
    ("xrm", None),
    ("xrn", None),
    ("xrr", None),
    ("xrt", None),
    ("xru", None),
    ("xrw", None),
    ("xsa", None),
    ("xsb", None),
    ("xsc", None),
    ("xsd", None),
    ("xse", None),
    ("xsh", None),
    ("xsi", None),
    ("xsj", None),
    ("xsl", None),
    ("xsm", None),
    ("xsn", None),
    ("xso", None),
    ("xsp", None),
    ("xsq", None),
    ("xsr", None),
    ("xss", None),
    ("xsu", None),
    ("xsv", None),
    ("xsy", None),
    ("xta", None),
    ("xtb", None),
    ("xtc", None),
    ("xtd", None),
    ("xte", None),
    ("xtg", None),
    ("xth", None),
    ("xti", None),
    ("xtj", None),
    ("xtl", None),
    ("xtm", None),
    ("xtn", None),
    ("xto", None),
    ("xtp", None),
    ("xtq", None),
    ("xtr", None),
    ("xts", None),
    ("xtt", None),
    ("xtu", None),
    ("xtv", None),
    ("xtw", None),
    ("xty", None),
    ("xua", None),
    ("xub", None),
    ("xud", None),
    ("xug", None),
    ("xuj", None),
    ("xul", None),
    ("xum", None),
    ("xun", None),
    ("xuo", None),
    ("xup", None),
    ("xur", None),
    ("xut", None),
    ("xuu", None),
    ("xve", None),
    ("xvi", None),
    ("xvn", None),
    ("xvo", None),
    ("xvs", None),
    ("xwa", None),
    ("xwc", None),
    ("xwd", None),
    ("xwe", None),
    ("xwg", None),
    ("xwj", None),
    ("xwk", None),
    ("xwl", None),
    ("xwo", None),
    ("xwr", None),
    ("xwt", None),
    ("xww", None),
    ("xxb", None),
    ("xxk", None),
    ("xxm", None),
    ("xxr", None),
    ("xxt", None),
    ("xya", None),
    ("xyb", None),
    ("xyj", None),
    ("xyk", None),
    ("xyl", None),
    ("xyt", None),
    ("xyy", None),
    ("xzh", None),
    ("xzm", None),
    ("xzp", None),
    ("yaa", None),
    ("yab", None),
    ("yac", None),
    ("yad", None),
    ("yae", None),
    ("yaf", None),
    ("yag", None),
    ("yah", None),
    ("yai", None),
    ("yaj", None),
    ("yak", None),
    ("yal", None),
    ("yam", None),
    ("yan", None),
    ("yao", None),
    ("yap", None),
    ("yaq", None),
    ("yar", None),
    ("yas", None),
    ("yat", None),
    ("yau", None),
    ("yav", None),
    ("yaw", None),
    ("yax", None),
    ("yay", None),
    ("yaz", None),
    ("yba", None),
    ("ybb", None),
    ("ybe", None),
    ("ybh", None),
    ("ybi", None),
    ("ybj", None),
    ("ybk", None),
    ("ybl", None),
    ("ybm", None),
    ("ybn", None),
    ("ybo", None),
    ("ybx", None),
    ("yby", None),
    ("ych", None),
    ("ycl", None),
    ("ycn", None),
    ("ycp", None),
    ("yda", None),
    ("ydd", None),
    ("yde", None),
    ("ydg", None),
    ("ydk", None),
    ("yea", None),
    ("yec", None),
    ("yee", None),
    ("yei", None),
    ("yej", None),
    ("yel", None),
    ("yer", None),
    ("yes", None),
    ("yet", None),
    ("yeu", None),
    ("yev", None),
    ("yey", None),
    ("yga", None),
    ("ygi", None),
    ("ygl", None),
    ("ygm", None),
    ("ygp", None),
    ("ygr", None),
    ("ygs", None),
    ("ygu", None),
    ("ygw", None),
    ("yha", None),
    ("yhd", None),
    ("yhl", None),
    ("yhs", None),
    ("yia", None),
    ("yid", "yi"),
    ("yif", None),
    ("yig", None),
    ("yih", None),
    ("yii", None),
    ("yij", None),
    ("yik", None),
    ("yil", None),
    ("yim", None),
    ("yin", None),
    ("yip", None),
    ("yiq", None),
    ("yir", None),
    ("yis", None),
    ("yit", None),
    ("yiu", None),
    ("yiv", None),
    ("yix", None),
    ("yiz", None),
    ("yka", None),
    ("ykg", None),
    ("yki", None),
    ("ykk", None),
    ("ykl", None),
    ("ykm", None),
    ("ykn", None),
    ("yko", None),
    ("ykr", None),
    ("ykt", None),
    ("yku", None),
    ("yky", None),
    ("yla", None),
    ("ylb", None),
    ("yle", None),
    ("ylg", None),
    ("yli", None),
    ("yll", None),
    ("ylm", None),
    ("yln", None),
    ("ylo", None),
    ("ylr", None),
    ("ylu", None),
    ("yly", None),
    ("ymb", None),
    ("ymc", None),
    ("ymd", None),
    ("yme", None),
    ("ymg", None),
    ("ymh", None),
    ("ymi", None),
    ("ymk", None),
    ("yml", None),
    ("ymm", None),
    ("ymn", None),
    ("ymo", None),
    ("ymp", None),
    ("ymq", None),
    ("ymr", None),
    ("yms", None),
    ("ymx", None),
    ("ymz", None),
    ("yna", None),
    ("ynd", None),
    ("yne", None),
    ("yng", None),
    ("ynk", None),
    ("ynl", None),
    ("ynn", None),
    ("yno", None),
    ("ynq", None),
    ("yns", None),
    ("ynu", None),
    ("yob", None),
    ("yog", None),
    ("yoi", None),
    ("yok", None),
    ("yol", None),
    ("yom", None),
    ("yon", None),
    ("yor", "yo"),
    ("yot", None),
    ("yox", None),
    ("yoy", None),
    ("ypa", None),
    ("ypb", None),
    ("ypg", None),
    ("yph", None),
    ("ypm", None),
    ("ypn", None),
    ("ypo", None),
    ("ypp", None),
    ("ypz", None),
    ("yra", None),
    ("yrb", None),
    ("yre", None),
    ("yrk", None),
    ("yrl", None),
    ("yrm", None),
    ("yrn", None),
    ("yro", None),
    ("yrs", None),
    ("yrw", None),
    ("yry", None),
    ("ysc", None),
    ("ysd", None),
    ("ysg", None),
    ("ysl", None),
    ("ysm", None),
    ("ysn", None),
    ("yso", None),
    ("ysp", None),
    ("ysr", None),
    ("yss", None),
    ("ysy", None),
    ("yta", None),
    ("ytl", None),
    ("ytp", None),
    ("ytw", None),
    ("yty", None),
    ("yua", None),
    ("yub", None),
    ("yuc", None),
    ("yud", None),
    ("yue", None),
    ("yuf", None),
    ("yug", None),
    ("yui", None),
    ("yuj", None),
    ("yuk", None),
    ("yul", None),
    ("yum", None),
    ("yun", None),
    ("yup", None),
    ("yuq", None),
    ("yur", None),
    ("yut", None),
    ("yuw", None),
    ("yux", None),
    ("yuy", None),
    ("yuz", None),
    ("yva", None),
    ("yvt", None),
    ("ywa", None),
    ("ywg", None),
    ("ywl", None),
    ("ywn", None),
    ("ywq", None),
    ("ywr", None),
    ("ywt", None),
    ("ywu", None),
    ("yww", None),
    ("yxa", None),
    ("yxg", None),
    ("yxl", None),
    ("yxm", None),
    ("yxu", None),
    ("yxy", None),
    ("yyr", None),
    ("yyu", None),
    ("yyz", None),
    ("yzg", None),
    ("yzk", None),
    ("zaa", None),
    ("zab", None),
    ("zac", None),
    ("zad", None),
    ("zae", None),
    ("zaf", None),
    ("zag", None),
    ("zah", None),
    ("zai", None),
    ("zaj", None),
    ("zak", None),
    ("zal", None),
    ("zam", None),
    ("zao", None),
    ("zap", None),
    ("zaq", None),
    ("zar", None),
    ("zas", None),
    ("zat", None),
    ("zau", None),
    ("zav", None),
    ("zaw", None),
    ("zax", None),
    ("zay", None),
    ("zaz", None),
    ("zba", None),
    ("zbc", None),
    ("zbe", None),
    ("zbl", None),
    ("zbt", None),
    ("zbu", None),
    ("zbw", None),
    ("zca", None),
    ("zcd", None),
    ("zch", None),
    ("zdj", None),
    ("zea", None),
    ("zeg", None),
    ("zeh", None),
    ("zen", None),
    ("zga", None),
    ("zgb", None),
    ("zgh", None),
    ("zgm", None),
    ("zgn", None),
    ("zgr", None),
    ("zha", "za"),
    ("zhb", None),
    ("zhd", None),
    ("zhi", None),
    ("zhn", None),
    ("zho", "zh"),
    ("zhw", None),
    ("zia", None),
    ("zib", None),
    ("zik", None),
    ("zil", None),
    ("zim", None),
    ("zin", None),
    ("ziw", None),
    ("ziz", None),
    ("zka", None),
    ("zkb", None),
    ("zkd", None),
    ("zkg", None),
    ("zkh", None),
    ("zkk", None),
    ("zkn", None),
    ("zko", None),
    ("zkp", None),
    ("zkr", None),
    ("zkt", None),
    ("zku", None),
    ("zkv", None),
    ("zkz", None),
    ("zla", None),
    ("zlj", None),
    ("zlm", None),
    ("zln", None),
    ("zlq", None),
    ("zma", None),
    ("zmb", None),
    ("zmc", None),
    ("zmd", None),
    ("zme", None),
    ("zmf", None),
    ("zmg", None),
    ("zmh", None),
    ("zmi", None),
    ("zmj", None),
    ("zmk", None),
    ("zml", None),
    ("zmm", None),
    ("zmn", None),
    ("zmo", None),
    ("zmp", None),
    ("zmq", None),
    ("zmr", None),
    ("zms", None),
    ("zmt", None),
    ("zmu", None),
    ("zmv", None),
    ("zmw", None),
    ("zmx", None),
    ("zmy", None),
    ("zmz", None),
    ("zna", None),
    ("zne", None),
    ("zng", None),
    ("znk", None),
    ("zns", None),
    ("zoc", None),
    ("zoh", None),
    ("zom", None),
    ("zoo", None),
    ("zoq", None),
    ("zor", None),
    ("zos", None),
    ("zpa", None),
    ("zpb", None),
    ("zpc", None),
    ("zpd", None),
    ("zpe", None),
    ("zpf", None),
    ("zpg", None),
    ("zph", None),
    ("zpi", None),
    ("zpj", None),
    ("zpk", None),
    ("zpl", None),
    ("zpm", None),
    ("zpn", None),
    ("zpo", None),
    ("zpp", None),
    ("zpq", None),
    ("zpr", None),
    ("zps", None),
    ("zpt", None),
    ("zpu", None),
    ("zpv", None),
    ("zpw", None),
    ("zpx", None),
    ("zpy", None),
    ("zpz", None),
    ("zqe", None),
    ("zra", None),
    ("zrg", None),
    ("zrn", None),
    ("zro", None),
    ("zrp", None),
    ("zrs", None),
    ("zsa", None),
    ("zsk", None),
    ("zsl", None),
    ("zsm", None),
    ("zsr", None),
    ("zsu", None),
    ("zte", None),
    ("ztg", None),
    ("ztl", None),
    ("ztm", None),
    ("ztn", None),
    ("ztp", None),
    ("ztq", None),
    ("zts", None),
    ("ztt", None),
    ("ztu", None),
    ("ztx", None),
    ("zty", None),
    ("zua", None),
    ("zuh", None),
    ("zul", "zu"),
    ("zum", None),
    ("zun", None),
    ("zuy", None),
    ("zwa", None),
    ("zxx", None),
    ("zyb", None),
    ("zyg", None),
    ("zyj", None),
    ("zyn", None),
    ("zyp", None),
    ("zza", None),
    ("zzj", None),
)
